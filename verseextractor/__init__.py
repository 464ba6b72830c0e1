# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
# require packages:
#   - fastapi
#   - requests
#   - pydantic-settings
#   - uvicorn
# ----------
