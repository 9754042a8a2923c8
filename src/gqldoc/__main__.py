# -*- coding: utf-8 -*-

from .cli import run

if __name__ == "__main__":
    run()
