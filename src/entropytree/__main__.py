# -*- coding: utf-8 -*-
"""
entropytree.__main__
====================

``python -m entropytree``; see :mod:`entropytree.cli`.
"""
from .cli import main

raise SystemExit(main())
