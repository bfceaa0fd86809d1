"""Default Messages

The library's built-in messages. Rules use these unless overridden with
`with_message`; bound and range messages are parameterized.
"""

MANDATORY_FIELD = "Campo obrigatório"
INVALID_FORMAT = "Formato inválido"
ILLOGICAL_DATES = "Data inicial deve ser anterior à final"
UNACCEPTABLE_VALUE = "Valor inaceitável"
UNIQUE_LIST = "Valores na lista devem ser únicos"
WEAK_PASSWORD = (
    "A senha deve ter no mínimo 8 caracteres, com letras maiúsculas e minúsculas, "
    "números e caracteres especiais"
)


def min_value_msg(bound: int | float) -> str:
    return f"Valor mínimo: {bound}"


def min_chars_msg(bound: int) -> str:
    return f"Mínimo de {bound} caracteres"


def max_value_msg(bound: int | float) -> str:
    return f"Valor máximo: {bound}"


def max_chars_msg(bound: int) -> str:
    return f"Máximo de {bound} caracteres"


def time_range_too_long_msg(max_days: int) -> str:
    return f"Período não pode ser maior que {max_days} dias"
