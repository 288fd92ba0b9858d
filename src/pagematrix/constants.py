"""Centralized constants for pagematrix."""

# Conversion factors to points (72 points per inch). The host treats one
# pixel as one point.
UNIT_TO_POINTS = {
    "pt": 1.0,
    "mm": 72.0 / 25.4,
    "cm": 72.0 / 2.54,
    "in": 72.0,
    "px": 1.0,
}

# Fractional digits kept when reporting measured geometry
PRECISION_DIGITS = 12

# Determinants at or below this magnitude are treated as singular
SINGULAR_TOLERANCE = 1e-12

# Property kinds understood by transform(), in the order they are documented
TRANSFORM_KINDS = (
    "translate",
    "rotate",
    "scale",
    "shear",
    "size",
    "width",
    "height",
    "position",
    "x",
    "y",
)

# Older spellings still accepted by transform()
TRANSFORM_KIND_ALIASES = {
    "translation": "translate",
    "rotation": "rotate",
    "scaling": "scale",
    "shearing": "shear",
}

# Reference points as laid out on a numeric keypad
NUMPAD_REFERENCE_POINTS = {
    7: "topLeft",
    8: "topCenter",
    9: "topRight",
    4: "centerLeft",
    5: "center",
    6: "centerRight",
    1: "bottomLeft",
    2: "bottomCenter",
    3: "bottomRight",
}
