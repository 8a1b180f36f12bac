"""
Configuration for the two-player duel
Rules, window, key bindings and cosmetic lookups
"""

# Window parameters
WINDOW_CONFIG = {
    "width": 800,
    "height": 500,
    "title": "Duo Duel",
    "update_rate": 1 / 60,
}

# ==============================================================================
# RULES
# All rates are per logical tick; with the fixed-step clock that is 1/tick_rate s
# ==============================================================================

RULES_CONFIG = {
    "start_health": 30,
    "damage": 10,             # Health lost per projectile hit
    "move_step": 4,           # px per tick
    "shoot_cooldown_ms": 300,
    "projectile_speed": 5,    # px per tick, sign comes from the owning side
    "projectile_size": (40, 40),
    "trail_alpha": 0.5,
    "trail_decay": 0.03,      # alpha lost per tick
    "trail_radius": 6,
    "explosion_radius": 15,
    "explosion_duration": 12,  # ticks
    "tick_rate": 60,
}

# Spawn boxes (x, y, width, height), top-left origin
PLAYER_CONFIG = {
    "left": (50, 180, 90, 150),
    "right": (660, 180, 50, 50),
}

# ==============================================================================
# KEY BINDINGS
# Key identifiers follow browser KeyboardEvent.key names
# ==============================================================================

KEY_BINDINGS = {
    "left": {"up": "w", "down": "s", "fire": "d"},
    "right": {"up": "ArrowUp", "down": "ArrowDown", "fire": "ArrowLeft"},
}

# ==============================================================================
# PRESENTATION
# ==============================================================================

BANNERS = {
    "labels": {"left": "Fruity Tyrant", "right": "SAVIOUR"},
    # Keyed by the winning side
    "winner": {"left": "Fruity RULEZ!", "right": "World Peace Achieved"},
}

# Selectable opponents for the right-hand player
OPPONENTS = ["gandhi", "oochi", "zen"]

# Opponent identity -> projectile style
PROJECTILE_STYLES = {
    "gandhi": "loom",
    "oochi": "star",
    "zen": "burger",
}

DEFAULT_PROJECTILE_STYLE = "burger"

# Left player's projectiles always use this style
LEFT_PROJECTILE_STYLE = "berry"

STYLE_COLORS = {
    "berry": (186, 45, 120),
    "loom": (205, 170, 110),
    "star": (250, 215, 60),
    "burger": (200, 120, 50),
}
