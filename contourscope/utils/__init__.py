"""Leaf utilities — image buffer, morphology, contours, geometry. No engine imports."""
