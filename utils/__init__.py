"""
utils - Логирование и обработка ошибок.
"""
