"""
Settlement errors — причины отклонения multi-send

Любая ошибка отклоняет транзакцию целиком: частичного применения нет.
Расчёт детерминирован, поэтому повтор без изменения входов
воспроизводит ту же ошибку.

Каждый класс несёт стабильный код причины (reason), который
используется как reject_reason в SettlementResult.
"""


class MultiSendError(Exception):
    """Базовая ошибка расчёта multi-send."""

    reason: str = "multi_send_error"


class UnknownDenomination(MultiSendError):
    """Вход ссылается на деноминацию без определения."""

    reason = "unknown_denomination"

    def __init__(self, denom: str):
        self.denom = denom
        super().__init__(f"Denomination {denom} does not have a definition")


class InsufficientBalance(MultiSendError):
    """
    Баланса отправителя не хватает на списание.

    required включает сумму перевода и долю комиссий (burn + commission),
    если проверка комиссий не отключена конфигурацией.
    """

    reason = "insufficient_balance"

    def __init__(self, address: str, denom: str, available: int = 0, required: int = 0):
        self.address = address
        self.denom = denom
        self.available = available
        self.required = required
        super().__init__(
            f"{address} does not have enough balance for {denom}: "
            f"available={available}, required={required}"
        )


class MismatchedSumForDenom(MultiSendError):
    """Сумма входов не равна сумме выходов по деноминации."""

    reason = "mismatched_sum_for_denom"

    def __init__(self, denom: str, input_total: int = 0, output_total: int = 0):
        self.denom = denom
        self.input_total = input_total
        self.output_total = output_total
        super().__init__(
            f"Input and output does not match for {denom}: "
            f"inputs={input_total}, outputs={output_total}"
        )
