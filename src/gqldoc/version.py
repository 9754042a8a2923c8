# -*- coding: utf-8 -*-
"""
Package information.
"""

__title__ = "gqldoc"
__description__ = "Render GraphQL schemas as AsciiDoc or Markdown documents."
__version__ = "0.1.0"
__author__ = "gqldoc contributors"
__license__ = "MIT"
