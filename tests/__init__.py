# -*- coding: utf-8 -*-
"""
Tests package.

Behaviour tests for ManagerKit controllers and form customization.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
