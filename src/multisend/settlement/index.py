"""
Index Builder — локальные индексы одного расчёта

Строит lookup-структуры из неизменяемых входных списков:
- address -> {denom -> amount} для существующих балансов
- denom -> DenomDefinition для определений
- address -> {denom -> amount} для ног перевода (повторы адресов суммируются)

Индексы живут только в пределах одного вызова. Отсутствующие адреса
и деноминации — просто отсутствующие ключи; их трактуют последующие стадии.

Порядок ключей (dict сохраняет порядок вставки) — порядок первого
появления. Это и есть стабильный порядок сканирования валидатора.
"""

from collections.abc import Iterable

from multisend.core.domain import Balance, DenomDefinition

BalanceIndex = dict[str, dict[str, int]]


def build_balance_index(balances: Iterable[Balance]) -> BalanceIndex:
    """
    Индекс существующих балансов.

    Повторный адрес в снапшоте дополняет предыдущий; при повторе
    деноминации побеждает последнее значение.

    Args:
        balances: Снапшот балансов

    Returns:
        address -> {denom -> amount}
    """
    index: BalanceIndex = {}
    for balance in balances:
        coins = index.setdefault(balance.address, {})
        for coin in balance.coins:
            coins[coin.denom] = coin.amount
    return index


def build_definition_index(definitions: Iterable[DenomDefinition]) -> dict[str, DenomDefinition]:
    """
    Индекс определений деноминаций.

    Args:
        definitions: Определения (одно на denom; при повторе побеждает последнее)

    Returns:
        denom -> DenomDefinition
    """
    return {definition.denom: definition for definition in definitions}


def aggregate_legs(legs: Iterable[Balance]) -> BalanceIndex:
    """
    Свёртка ног перевода по адресу.

    Один адрес может встречаться в нескольких ногах; суммы по одной
    деноминации складываются.

    Args:
        legs: inputs или outputs MultiSend

    Returns:
        address -> {denom -> amount} в порядке первого появления
    """
    index: BalanceIndex = {}
    for leg in legs:
        coins = index.setdefault(leg.address, {})
        for coin in leg.coins:
            coins[coin.denom] = coins.get(coin.denom, 0) + coin.amount
    return index


def denom_totals(legs: BalanceIndex) -> dict[str, int]:
    """
    Суммы по деноминациям.

    Returns:
        denom -> total в порядке первого появления
    """
    totals: dict[str, int] = {}
    for coins in legs.values():
        for denom, amount in coins.items():
            totals[denom] = totals.get(denom, 0) + amount
    return totals


def by_denom(legs: BalanceIndex) -> dict[str, dict[str, int]]:
    """
    Транспонирование индекса ног: denom -> {address -> amount}.

    Порядок адресов внутри деноминации — порядок первого появления.
    """
    result: dict[str, dict[str, int]] = {}
    for address, coins in legs.items():
        for denom, amount in coins.items():
            result.setdefault(denom, {})[address] = amount
    return result


def existing_amount(index: BalanceIndex, address: str, denom: str) -> int:
    """Существующий баланс адреса по деноминации (0, если нет записи)."""
    return index.get(address, {}).get(denom, 0)
