"""Espresso API: sheets, roasters, beans and shots over a relational store."""

__all__: list[str] = []
