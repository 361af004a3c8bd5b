# -*- coding: utf-8 -*-
"""
LocEdit Core Package

File I/O, progress persistence and export.
"""
