"""Política de redondeo monetario del dominio."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

# Unidad mínima de moneda: centavos.
MONEY_QUANTUM = Decimal("0.01")

# Mayor monto representable en las columnas Numeric(12, 2).
MAX_MONEY_AMOUNT = Decimal("9999999999.99")


def to_decimal(value: object) -> Decimal:
    """
    Convierte un valor numérico a Decimal sin pasar por float.

    Raises:
        ValueError: si el valor no es numérico.
    """
    if isinstance(value, bool):
        raise ValueError(f"valor no numérico: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValueError(f"valor no numérico: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"valor no finito: {value!r}")
    return result


def to_money(value: object) -> Decimal:
    """
    Redondea un monto a centavos con ROUND_HALF_UP.

    Es la única regla de redondeo del sistema: todo precio calculado pasa por aquí.

    Raises:
        ValueError: si el valor no es numérico o no cabe en la precisión decimal.
    """
    try:
        return to_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"monto fuera de rango: {value!r}") from exc


def has_cents_precision(value: Decimal) -> bool:
    """Verifica que el monto no tenga más de dos decimales significativos."""
    return value == value.quantize(MONEY_QUANTUM)
