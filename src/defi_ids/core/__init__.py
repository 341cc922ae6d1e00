"""
Core: значения, packed-сериализация, хеширование и контракты.

Не зависит от внешних систем (блокчейн, хранилища, сеть).
"""
