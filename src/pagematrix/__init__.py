"""pagematrix - Affine transforms and page item geometry for layout scripting."""

import logging

__version__ = "0.1.0"

from pagematrix.exceptions import (
    ConfigError,
    EmptyStackError,
    InvalidArgumentError,
    PageMatrixError,
    SingularMatrixError,
)
from pagematrix.matrix import Matrix2D
from pagematrix.reference import ReferencePoint
from pagematrix.session import Session
from pagematrix.units import Units

__all__ = [
    "__version__",
    "ConfigError",
    "EmptyStackError",
    "InvalidArgumentError",
    "Matrix2D",
    "PageMatrixError",
    "ReferencePoint",
    "Session",
    "SingularMatrixError",
    "Units",
]

# Prevent "No handler found" warnings when used as a library
logging.getLogger("pagematrix").addHandler(logging.NullHandler())
