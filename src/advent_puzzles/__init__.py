"""Solvers for the trebuchet calibration and cube game puzzles."""
