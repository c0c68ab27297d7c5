"""pixweave: a pixel-interleaving image combiner and a tiny calculator.

Two independent command-line utilities sharing one package: one weaves two
images together pixel by pixel, the other evaluates a single four-function
arithmetic expression.
"""

__version__ = "0.1.0"
