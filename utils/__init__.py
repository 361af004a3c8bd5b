# -*- coding: utf-8 -*-
"""
LocEdit Utilities Package
"""
