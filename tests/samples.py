# (red, green, blue) -> (hue in degrees, saturation, lightness)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (204, 0, 0): (0.0, 1.0, 0.4),
    (255, 128, 0): (60 * 128 / 255, 1.0, 0.5),
    (255, 0, 128): (360 - 60 * 128 / 255, 1.0, 0.5),
    (52, 101, 164): (213.75, 112 / 216, 216 / 510),
    (115, 210, 22): (60 * (2 - 93 / 188), 188 / 232, 232 / 510),
    (239, 41, 41): (0.0, 198 / 230, 280 / 510),
}

# (hue in degrees, saturation, lightness) -> (red, green, blue)
samples_hsl_rgb = {
    (0.0, 1.0, 0.5): (255, 0, 0),
    (120.0, 1.0, 0.5): (0, 255, 0),
    (240.0, 1.0, 0.5): (0, 0, 255),
    (60.0, 1.0, 0.5): (255, 255, 0),
    (180.0, 1.0, 0.5): (0, 255, 255),
    (300.0, 1.0, 0.5): (255, 0, 255),
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.0, 0.0, 1.0): (255, 255, 255),
    (0.0, 0.0, 0.5): (128, 128, 128),
    (210.0, 0.5, 0.25): (32, 64, 96),
    (90.0, 0.6, 0.6): (153, 214, 92),
}
