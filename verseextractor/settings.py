# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from typing import Annotated

from fastapi import Depends
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        # `PORT=` means the default port
        'env_ignore_empty': True,
    }

    host: str = '0.0.0.0'
    port: int = 8081
    fetch_timeout: float | None = None

def load_settings() -> Settings:
    return Settings()

SettingsDeps = Annotated[Settings, Depends(load_settings)]
