"""Interpretation catalog of the TAC customer-service competency test."""

from types import MappingProxyType
from typing import Mapping, Tuple

from psychometrics.catalogs.base import Band
from psychometrics.models.base import CatalogEntry

CATALOG_VERSION = "tac-1.0"


DIMENSION_NAMES: Mapping[str, str] = MappingProxyType({
    "D1": "Orientación al Cliente",
    "D2": "Comunicación Efectiva",
    "D3": "Empatía",
    "D4": "Resolución de Problemas",
    "D5": "Tolerancia a la Frustración",
    "D6": "Trabajo Bajo Presión",
    "D7": "Actitud Positiva y Colaboración",
})


# ============================================================================
# GLOBAL BANDS
# ============================================================================

GLOBAL_BANDS: Tuple[Band, ...] = (
    Band(
        code="EXCELENTE",
        label="Excelente",
        min_score=4.0,
        description=(
            "Perfil excepcional para atención al cliente - "
            "Todas las competencias altamente desarrolladas"
        ),
        recommendations=(
            "Candidato ideal para roles de atención al cliente",
            "Puede servir como mentor para otros",
            "Apto para manejar clientes de alto valor",
        ),
    ),
    Band(
        code="ADECUADO",
        label="Adecuado",
        min_score=3.0,
        description=(
            "Perfil adecuado para atención al cliente - "
            "Competencias bien desarrolladas con áreas de oportunidad"
        ),
        recommendations=(
            "Apto para roles de atención al cliente",
            "Beneficiaría de capacitación específica en áreas de desarrollo",
        ),
    ),
    Band(
        code="EN_DESARROLLO",
        label="En Desarrollo",
        min_score=2.0,
        description="Requiere desarrollo - Necesita capacitación en múltiples competencias",
        recommendations=(
            "Requiere capacitación antes de asumir rol de atención",
            "Considerar período de práctica supervisada",
        ),
    ),
    Band(
        code="REQUIERE_MEJORA",
        label="Requiere Mejora",
        description=(
            "Perfil no recomendado - Requiere mejora significativa en competencias clave"
        ),
        recommendations=(
            "No recomendado para atención al cliente directa",
            "Requiere desarrollo significativo de competencias",
            "Considerar roles operativos sin contacto con clientes",
        ),
    ),
)

# Line appended after the band recommendations listing the growth areas
GROWTH_AREA_LINES: Mapping[str, str] = MappingProxyType({
    "ADECUADO": "Reforzar: {areas}",
    "EN_DESARROLLO": "Áreas prioritarias: {areas}",
})


# ============================================================================
# DIMENSION TIERS
# ============================================================================

class DimensionTier(CatalogEntry):
    """Seven-tier reading of a dimension mean."""

    label: str
    min_score: float


DIMENSION_TIERS: Tuple[DimensionTier, ...] = (
    DimensionTier(label="Excelente", min_score=4.5),
    DimensionTier(label="Muy Bueno", min_score=4.0),
    DimensionTier(label="Bueno", min_score=3.5),
    DimensionTier(label="Adecuado", min_score=3.0),
    DimensionTier(label="En Desarrollo", min_score=2.5),
    DimensionTier(label="Requiere Atención", min_score=2.0),
    DimensionTier(label="Deficiente", min_score=float("-inf")),
)

# Dimension descriptions, in the order of DIMENSION_TIERS
_TIER_DESCRIPTIONS: Mapping[str, Tuple[str, ...]] = {
    "D1": (
        "Enfoque excepcional en satisfacer al cliente",
        "Fuerte orientación a las necesidades del cliente",
        "Buen nivel de preocupación por el cliente",
        "Orientación básica al cliente",
        "Necesita fortalecer enfoque en el cliente",
        "Poca orientación al cliente",
        "No demuestra interés en el cliente",
    ),
    "D2": (
        "Comunicación clara, empática y efectiva",
        "Muy buena capacidad de comunicación",
        "Buena comunicación en general",
        "Comunicación funcional",
        "Necesita mejorar claridad y escucha",
        "Dificultades de comunicación frecuentes",
        "Comunicación deficiente",
    ),
    "D3": (
        "Alta capacidad de conexión emocional",
        "Muy empático y comprensivo",
        "Buena capacidad de empatía",
        "Empatía básica presente",
        "Necesita desarrollar empatía",
        "Baja capacidad de empatía",
        "No demuestra empatía",
    ),
    "D4": (
        "Excelente en encontrar soluciones",
        "Muy buen solucionador de problemas",
        "Buena capacidad de resolución",
        "Puede resolver problemas básicos",
        "Necesita mejorar análisis y solución",
        "Dificultad para resolver problemas",
        "No resuelve problemas efectivamente",
    ),
    "D5": (
        "Excelente manejo de frustración",
        "Muy alta tolerancia a situaciones difíciles",
        "Buena tolerancia a la frustración",
        "Tolera situaciones normales",
        "Se frustra con facilidad",
        "Baja tolerancia a la frustración",
        "No tolera la frustración",
    ),
    "D6": (
        "Excelente desempeño bajo presión",
        "Muy buen manejo de la presión",
        "Buen rendimiento bajo presión",
        "Puede manejar presión moderada",
        "Dificultad con alta demanda",
        "Bajo rendimiento bajo presión",
        "No puede trabajar bajo presión",
    ),
    "D7": (
        "Actitud excepcionalmente positiva",
        "Muy positivo y colaborador",
        "Buena actitud y colaboración",
        "Actitud generalmente positiva",
        "Necesita mejorar actitud",
        "Actitud frecuentemente negativa",
        "Actitud negativa predominante",
    ),
}

TIER_DESCRIPTIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    dimension: MappingProxyType({
        tier.label: text for tier, text in zip(DIMENSION_TIERS, texts)
    })
    for dimension, texts in _TIER_DESCRIPTIONS.items()
})

NO_DESCRIPTION = "Sin descripción"

NO_STRENGTHS_TEXT = "Perfil en desarrollo, aún no se identifican fortalezas claras"
NO_GROWTH_AREAS_TEXT = "Mantener y reforzar competencias actuales"


def get_dimension_tier(mean: float) -> DimensionTier:
    """Get the tier a dimension mean falls into."""
    for tier in DIMENSION_TIERS:
        if mean >= tier.min_score:
            return tier
    return DIMENSION_TIERS[-1]
