"""
Lightdash Test Suite

This package contains the unit tests for the lightdash utility library.

"""
