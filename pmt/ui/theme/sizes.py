# Everything in here is a divisor of the ring's shortest side.
RING = {
    "font_ratio": 4,
    "outer_ratio": 10,
    "inner_ratio": 12,
}

FONT_FAMILY = "Avenir"
