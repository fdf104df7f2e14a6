"""Training Attendance package.

This package is organized by feature modules (attendance, sections, ...)
with small pure-logic services and a thin repository layer for collaborators.
"""
