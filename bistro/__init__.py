"""
Bistro package

This package models a small restaurant kitchen: dishes and their
dietary variants, a kitchen bag with aggregate statistics, kitchen
stations holding dishes and ingredient stock, and a station manager
routing orders to them.  Domain objects, rule tables, dietary rules,
the orchestration core and console rendering live in separate
subpackages.
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
