"""
PySATL Discrete
===============

Unit tests for discrete distributions: tables, strategies, families and
the command-line interface.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
