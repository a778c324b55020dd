"""Global constants for the application."""

# Canvas and animation settings
DEFAULT_WIDTH = 1280  # Canvas width in pixels
DEFAULT_HEIGHT = 720  # Canvas height in pixels
DEFAULT_FPS = 30  # Default frames per second for animation

# Image stars
IMAGE_COUNT = 31  # Number of Image<N>.jpeg files bound to stars
IMAGE_STAR_SIZE_MIN = 5.0  # Smallest clickable star radius
IMAGE_STAR_SIZE_MAX = 9.0  # Largest clickable star radius
IMAGE_STAR_GLOW = 4.0  # Extra glow radius around clickable stars

# Placement
MIN_STAR_DISTANCE = 70.0  # Minimum distance between placed stars
PLACEMENT_MARGIN = 50.0  # Keep placed stars away from canvas edges
PLACEMENT_MAX_ATTEMPTS = 200  # Attempts before accepting the last candidate
EXCLUSION_RADIUS = 150.0  # Clear circle around the canvas centre (title overlay)

# Background stars
BACKGROUND_STAR_COUNT = 300
BACKGROUND_STAR_SIZE_MIN = 1.0
BACKGROUND_STAR_SIZE_MAX = 3.0
BACKGROUND_STAR_COLORS = ((0x55, 0x55, 0x55), (0x77, 0x77, 0x77), (0x99, 0x99, 0x99))

# Twinkle (speeds in radians per second)
TWINKLE_FLOOR = 0.5  # Radius never drops below this
TWINKLE_SPEED_MIN = 1.0
TWINKLE_SPEED_MAX = 3.0
TWINKLE_AMPLITUDE_MIN = 0.2
TWINKLE_AMPLITUDE_MAX = 1.0

# Constellation lines
CONSTELLATION_DISTANCE = 120.0  # Stars closer than this are connected
CONSTELLATION_MEMBERS = ("all", "image")  # Which stars take part in constellation lines

# Shooting stars (speeds in pixels per tick)
SHOOTING_STAR_SPAWN_PROBABILITY = 0.005  # Chance per tick to spawn a new one
SHOOTING_STAR_LIFESPAN = 100  # Ticks before a shooting star bursts
SHOOTING_STAR_SPEED_MIN = 5.0
SHOOTING_STAR_SPEED_MAX = 10.0
SHOOTING_STAR_LENGTH_MIN = 50.0
SHOOTING_STAR_LENGTH_MAX = 120.0
SHOOTING_STAR_SPAWN_BAND = 300.0  # Shooting stars start within this many pixels of the top
SHOOTING_STAR_WRAP_X = -100.0  # Reset x for wrapping shooting stars
INITIAL_SHOOTING_STARS = 0

# Particle bursts
BURST_PARTICLE_COUNT = 12  # Particles spawned when a shooting star expires
PARTICLE_LIFE = 40  # Ticks a particle lives
PARTICLE_SPEED_MAX = 2.5  # Max pixels per tick
PARTICLE_RADIUS_MIN = 1.0
PARTICLE_RADIUS_MAX = 2.5

# Interaction
CLICK_RADIUS = 15.0  # Hit radius around clickable stars

# Audio
MAX_VOLUME = 0.5  # Music volume cap
VOLUME_FADE_RATE = 0.1  # Volume units per second

# Policies and styles
SHOOTING_STAR_POLICIES = ("burst", "wrap")
BACKGROUND_STYLES = ("solid", "gradient")
