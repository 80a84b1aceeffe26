# absolute wall roughness of the duct: 0.1 mm, expressed in m
WALL_ROUGHNESS = 0.1e-3

# Reynolds number below which duct flow is taken to be laminar
LAMINAR_LIMIT = 2300.0

# fixed-point iteration of the Colebrook-White equation
INITIAL_FRICTION_FACTOR = 0.02
MAX_ITERATIONS = 100
MAX_DIFFERENCE = 1e-6
