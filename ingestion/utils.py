def clamp(value, low=0.0, high=1.0):
    return max(low, min(high, value))


def clamp_percentage(value):
    return clamp(float(value), 0.0, 100.0)
