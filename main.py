#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
PCOS Risk Assessment
Run the desktop application from a source checkout.
"""

from pcos_assessment.main import main


if __name__ == "__main__":
    main()
