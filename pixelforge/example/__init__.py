# -*- coding: utf-8 -*-
"""Runnable pixelforge examples."""
