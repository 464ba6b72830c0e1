# -*- coding: utf-8 -*-
#
# Copyright (c) 2026~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from typing import TypedDict


class Item(TypedDict):
    title: str
    link: str
    description: str
    pub_date: str
    content_encoded: str


class Feed(TypedDict):
    title: str
    link: str
    description: str
    items: list[Item]
