"""
Simulation tuning knobs.
"""

# Environment
SCREEN_W, SCREEN_H = 980, 720
FPS = 60

# Population controls
INITIAL_COUNT = 90
MAX_CREATURES = 150

# Food
MAX_FOOD = 50
FOOD_SPAWN_CHANCE = 0.05  # per frame
FOOD_ENERGY = 30.0

# Bodies
RADIUS = 5.0
FOOD_RADIUS = 3.0

# Movement
BASE_SPEED = 1.5
MIN_SPEED = 0.5
MAX_SPEED = 3.0
STEER_STRENGTH = 0.05

# Energy + life
START_ENERGY = 100.0
ENERGY_DECAY = 0.05  # per frame
FADE_STEP = 0.02  # alpha lost per frame once out of energy

# Interaction ranges
SENSE_RADIUS = RADIUS * 4
REPRO_RADIUS = RADIUS * 2

# Reproduction / mutation
REPRO_COST = 15.0
REPRO_COOLDOWN = 100  # frames
MUTATION_CHANCE = 0.1
SPEED_VARIATION = 0.5  # offspring speed shifts by up to +/- half of this
