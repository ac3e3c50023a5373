"""
Olympic Report Color Palette and Design Tokens
Ring colours for series, medal metals for the leaderboard
"""

# Olympic ring colours
RING_BLUE = '#0085C7'
RING_RED = '#DF0024'

# Primary brand colors
NAVY_PRIMARY = '#14325C'      # Headers, primary series
NAVY_DARK = '#0B1F3A'         # Hover states, gradients
GRAY_NEUTRAL = '#78909C'      # Unstyled categories, fallbacks

# Medal colours
GOLD = '#D4AF37'
SILVER = '#A8A9AD'
BRONZE = '#CD7F32'

# UI Colors
BORDER = '#e9ecef'

# Text Colors
TEXT_PRIMARY = '#1a1a1a'
TEXT_SECONDARY = '#4b5563'
TEXT_MUTED = '#6c757d'

# Status Colors
WARNING = '#FFB800'
DANGER = '#dc3545'
INFO = RING_BLUE

# Participation series (Q1)
PARTICIPATION_COLORS = {
    'Men': RING_BLUE,
    'Women': RING_RED,
    'Total': NAVY_PRIMARY,
}

# Leaderboard bars (Q2)
MEDAL_COLORS = {
    'Total': NAVY_PRIMARY,
    'Gold': GOLD,
    'Silver': SILVER,
    'Bronze': BRONZE,
}

# Heatmap scale (Q3), light to dark
HEATMAP_SCALE = [
    [0.0, '#ffffff'],
    [0.5, '#7FB8DC'],
    [1.0, NAVY_PRIMARY],
]
