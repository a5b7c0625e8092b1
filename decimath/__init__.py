"""
decimath — трансцендентные и специальные функции произвольной точности

Основан на decimal.Decimal (General Decimal Arithmetic) как движке хранения и
округления. Все функции вычисляются из примитивов движка (+, -, *, /, sqrt,
exp, ln) через ряды, range reduction и адаптивное повышение точности.

Подпакеты:
- decimath.core.math    : тригонометрия, гиперболические функции, gamma
- decimath.core.domain  : единицы углов, настройки
- decimath.complex      : комплексная алгебра поверх любого RealOps типа
"""

__version__ = "0.1.0"
