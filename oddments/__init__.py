"""Big integers, expression calculators, string combinatorics, a terminal block game and a TCP chat."""

__version__ = "0.1.0"