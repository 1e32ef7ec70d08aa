from decimal import Decimal
from enum import Enum


class SeverityConst(str, Enum):
    SEM_OCORRENCIA = "sem_ocorrencia"
    LEVE = "leve"
    MEDIO = "medio"
    GRAVE = "grave"


class TransportStatusConst(str, Enum):
    PENDENTE = "pendente"
    EM_TRANSITO = "em_transito"
    ENTREGUE = "entregue"
    CANCELADO = "cancelado"


class DriverModalityConst(str, Enum):
    PJ = "pj"
    CLT = "clt"
    AGREGADO = "agregado"


class RoleConst(str, Enum):
    ADMIN = "admin"
    OPERADOR = "operador"
    VISUALIZADOR = "visualizador"


class ScoringConst:
    MAX_SCORE = 100
    WEIGHT_TOTAL = Decimal("100")
    WEIGHT_TOLERANCE = Decimal("0.01")
    DECIMALS = 2

    DEFAULT_PENALTY_LEVE = 10.0
    DEFAULT_PENALTY_MEDIO = 50.0
    DEFAULT_PENALTY_GRAVE = 100.0


class RankingConst:
    LIST_SIZE = 5
    LAST_MONTH_DAYS = 30


class TransportConst:
    REQUEST_PREFIX = "OTD"
    REQUEST_DIGITS = 5
    COUNTER_ID = "transport_counter"


BRAZILIAN_STATES = (
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA",
    "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI", "RJ", "RN",
    "RS", "RO", "RR", "SC", "SP", "SE", "TO",
)

CNH_TYPES = ("A", "B", "C", "D", "E", "AB", "AC", "AD", "AE")
