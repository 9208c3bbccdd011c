"""Small command-line calculators: temperature, time of day, BMI, arithmetic, fuel, sums, matrix and file statistics."""

__version__ = "0.1.0"