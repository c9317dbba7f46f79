"""
Configuration & Global Constants
================================
This module serves as the central registry for numeric limits, tolerances and
the random ranges used by the exercise generator.

Exports:
    MAX_INPUT_VALUE (float): Largest value accepted by the solver.
    SIDE_RANGE, ANGLE_RANGE (tuple[int, int]): Inclusive ranges for generated values.
    MAX_GENERATION_ATTEMPTS (int): Retry cap per generated exercise.
"""
import logging

# Solver
MAX_INPUT_VALUE: float = 1_000_000
ANGLE_SUM_TOLERANCE: float = 0.5  # degrees

# Derived geometry
DEGENERATE_AREA: float = 0.0001
COLLINEAR_EPS: float = 0.0001
RIGHT_ANGLE_TOLERANCE: float = 0.1  # degrees

# Exercise generator
SIDE_RANGE: tuple[int, int] = (3, 17)
ANGLE_RANGE: tuple[int, int] = (10, 89)  # degrees
HYPOTENUSE_OFFSET: int = 5
MAX_GENERATION_ATTEMPTS: int = 50
# Legs / hypotenuse + angle / leg + angle
RIGHT_SUBCASE_WEIGHTS: tuple[float, float, float] = (0.4, 0.3, 0.3)
DEFAULT_QTY_RIGHT: int = 3
DEFAULT_QTY_OBLIQUE: int = 2

# Answer validation
SIDE_TOLERANCE: float = 0.2

# Export
CSV_DELIMITER: str = ";"

# Logging
DEFAULT_LOG_LEVEL: int = logging.WARNING
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
