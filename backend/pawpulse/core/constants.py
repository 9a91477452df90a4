"""Shared signal-processing and calorie constants.

Defaults for the estimators live here so they can be tuned (or overridden
through settings) without touching the algorithms.
"""

# Exponential smoothing factor for the IR signal
EMA_ALPHA = 0.2

# Smoothed IR amplitude a beat peak must exceed
HR_PEAK_THRESHOLD = 50.0

# Physiologically plausible instantaneous BPM range, inclusive
BPM_MIN = 40.0
BPM_MAX = 220.0

# Rolling BPM history length
BPM_HISTORY_SIZE = 100

# Smoothed acceleration magnitude (g) a step peak must exceed
STEP_THRESHOLD = 1.2

# Refractory period between counted steps (ms)
MIN_STEP_INTERVAL_MS = 250.0

# Samples in the acceleration moving-average window
STEP_WINDOW_SIZE = 10

MS_PER_MINUTE = 60000.0

# Basal metabolic rate per breed (kcal per kg^0.75)
BREED_BMR = {
    "Labrador": 70,
    "German Shepherd": 75,
    "Golden Retriever": 72,
    "French Bulldog": 60,
    "Poodle": 65,
    "Other": 70,
}

AGE_FACTOR = {
    "puppy (0-1 year)": 1.3,
    "adult (1-7 years)": 1.2,
    "senior (7+ years)": 1.1,
}

SEX_FACTOR = {
    "male": 1.2,
    "female": 1.1,
}

# Activity factor by speed: below 2 -> walking, below 4 -> trotting, else running
ACTIVITY_SPEED_BANDS = [(2.0, 1.2), (4.0, 1.5)]
ACTIVITY_FACTOR_MAX = 1.8
