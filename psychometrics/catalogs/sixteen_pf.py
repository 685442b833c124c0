"""Interpretation catalog of the 16PF personality inventory."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from psychometrics.models.base import CatalogEntry

CATALOG_VERSION = "16pf-1.0"


class FactorDefinition(CatalogEntry):
    """Names and descriptions of one 16PF factor."""

    code: str
    name: str
    low_pole: str
    high_pole: str
    low_band: str
    medium_band: str
    high_band: str


class DecatipoLevel(str, Enum):
    """Five-level reading of a decatipo."""

    MUY_BAJO = "MUY_BAJO"
    BAJO = "BAJO"
    PROMEDIO = "PROMEDIO"
    ALTO = "ALTO"
    MUY_ALTO = "MUY_ALTO"

    @property
    def label(self) -> str:
        """Get display label for the level."""
        return DECATIPO_LEVEL_LABELS[self]


class FactorBand(str, Enum):
    """Three-level reading of a decatipo."""

    BAJO = "BAJO"
    MEDIO = "MEDIO"
    ALTO = "ALTO"


DECATIPO_LEVEL_LABELS: Mapping[DecatipoLevel, str] = MappingProxyType({
    DecatipoLevel.MUY_BAJO: "Muy Bajo",
    DecatipoLevel.BAJO: "Bajo",
    DecatipoLevel.PROMEDIO: "Promedio",
    DecatipoLevel.ALTO: "Alto",
    DecatipoLevel.MUY_ALTO: "Muy Alto",
})


# ============================================================================
# FACTORS
# ============================================================================

_FACTORS: Tuple[FactorDefinition, ...] = (
    FactorDefinition(
        code="A", name="Afectotimia",
        low_pole="Reservado, frío, distante",
        high_pole="Cálido, afable, cercano",
        low_band="Reservado, distante, crítico, inflexible",
        medium_band="Balance entre calidez y distancia",
        high_band="Cálido, participativo, generoso, atento a los demás",
    ),
    FactorDefinition(
        code="B", name="Inteligencia",
        low_pole="Pensamiento concreto",
        high_pole="Pensamiento abstracto",
        low_band="Pensamiento concreto, menor capacidad de abstracción",
        medium_band="Razonamiento promedio",
        high_band="Pensamiento abstracto, aprende rápidamente, inteligente",
    ),
    FactorDefinition(
        code="C", name="Estabilidad Emocional",
        low_pole="Emocionalmente inestable",
        high_pole="Emocionalmente estable",
        low_band="Reactivo, emocionalmente inestable, cambiante",
        medium_band="Estabilidad emocional moderada",
        high_band="Estable emocionalmente, maduro, calmado",
    ),
    FactorDefinition(
        code="E", name="Dominancia",
        low_pole="Sumiso, conformista",
        high_pole="Dominante, asertivo",
        low_band="Deferente, cooperativo, evita conflictos, sumiso",
        medium_band="Balance entre asertividad y cooperación",
        high_band="Dominante, asertivo, competitivo, terco",
    ),
    FactorDefinition(
        code="F", name="Impulsividad",
        low_pole="Serio, prudente",
        high_pole="Entusiasta, impulsivo",
        low_band="Serio, cuidadoso, taciturno, prudente",
        medium_band="Nivel moderado de animación",
        high_band="Animado, espontáneo, entusiasta, activo",
    ),
    FactorDefinition(
        code="G", name="Conformidad Grupal",
        low_pole="No conformista",
        high_pole="Conformista, normativo",
        low_band="Inconforme, descuida normas, oportunista",
        medium_band="Atención moderada a normas",
        high_band="Atento a normas, cumplidor, moralista, formal",
    ),
    FactorDefinition(
        code="H", name="Atrevimiento",
        low_pole="Tímido, inhibido",
        high_pole="Atrevido, sociable",
        low_band="Tímido, temeroso, cohibido en situaciones sociales",
        medium_band="Audacia social moderada",
        high_band="Atrevido, aventurero, socialmente audaz",
    ),
    FactorDefinition(
        code="I", name="Sensibilidad",
        low_pole="Realista, práctico",
        high_pole="Sensible, emocional",
        low_band="Objetivo, práctico, realista",
        medium_band="Balance entre sensibilidad y objetividad",
        high_band="Sensible, estético, sentimental",
    ),
    FactorDefinition(
        code="L", name="Suspicacia",
        low_pole="Confiado, sin sospechas",
        high_pole="Suspicaz, desconfiado",
        low_band="Confiado, sin sospechas, adaptable",
        medium_band="Nivel moderado de vigilancia",
        high_band="Vigilante, suspicaz, escéptico, desconfiado",
    ),
    FactorDefinition(
        code="M", name="Imaginación",
        low_pole="Práctico, realista",
        high_pole="Imaginativo, idealista",
        low_band="Práctico, orientado a soluciones, realista",
        medium_band="Balance entre abstracción y practicidad",
        high_band="Abstracto, imaginativo, distraído, bohemio",
    ),
    FactorDefinition(
        code="N", name="Astucia",
        low_pole="Natural, espontáneo",
        high_pole="Astuto, calculador",
        low_band="Directo, genuino, ingenuo, franco",
        medium_band="Nivel moderado de privacidad",
        high_band="Privado, calculador, discreto, diplomático",
    ),
    FactorDefinition(
        code="O", name="Culpabilidad",
        low_pole="Seguro, confiado",
        high_pole="Inseguro, preocupado",
        low_band="Seguro de sí mismo, sereno, complacido",
        medium_band="Nivel moderado de aprensión",
        high_band="Aprensivo, inseguro, culpable, preocupado",
    ),
    FactorDefinition(
        code="Q1", name="Rebeldía",
        low_pole="Conservador, tradicional",
        high_pole="Rebelde, innovador",
        low_band="Tradicional, apegado a lo familiar, conservador",
        medium_band="Apertura moderada al cambio",
        high_band="Abierto al cambio, experimenta, liberal, crítico",
    ),
    FactorDefinition(
        code="Q2", name="Autosuficiencia",
        low_pole="Dependiente del grupo",
        high_pole="Autosuficiente, individualista",
        low_band="Gregario, dependiente del grupo, afiliativo",
        medium_band="Balance entre autosuficiencia y dependencia",
        high_band="Autosuficiente, solitario, individualista",
    ),
    FactorDefinition(
        code="Q3", name="Autocontrol",
        low_pole="Sin control, descuidado",
        high_pole="Controlado, disciplinado",
        low_band="Tolera el desorden, flexible, improvisado",
        medium_band="Nivel moderado de control",
        high_band="Perfeccionista, organizado, autocontrol, disciplinado",
    ),
    FactorDefinition(
        code="Q4", name="Tensión",
        low_pole="Relajado, tranquilo",
        high_pole="Tenso, ansioso",
        low_band="Relajado, plácido, tranquilo, paciente",
        medium_band="Nivel moderado de tensión",
        high_band="Tenso, enérgico, impaciente, frustrado",
    ),
)

FACTORS: Mapping[str, FactorDefinition] = MappingProxyType(
    {factor.code: factor for factor in _FACTORS}
)


# ============================================================================
# THRESHOLDS AND TEXTS
# ============================================================================

# Decatipo at which the high pole description applies
HIGH_POLE_FROM = 6

UNKNOWN_FACTOR_TEXT = "Factor desconocido"

SUMMARY_BALANCED = "Perfil de personalidad equilibrado sin factores extremos destacados."
SUMMARY_WITH_HIGHLIGHTS = "Perfil de personalidad con características destacadas: {highlights}."
HIGHLIGHT_LOW = "{factor} muy bajo"
HIGHLIGHT_HIGH = "{factor} muy alto"


class RecommendationRule(CatalogEntry):
    """Recommendation triggered by a factor crossing a threshold."""

    factor: str
    at_most: int = 10
    at_least: int = 1
    text: str

    def applies(self, decatipo: int) -> bool:
        """Whether the decatipo triggers this rule."""
        return self.at_least <= decatipo <= self.at_most


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    RecommendationRule(
        factor="C", at_most=3,
        text="Considerar entrenamiento en manejo del estrés y regulación emocional",
    ),
    RecommendationRule(
        factor="G", at_most=3,
        text="Reforzar importancia del cumplimiento de normas y protocolos de seguridad",
    ),
    RecommendationRule(
        factor="Q3", at_most=3,
        text="Supervisión cercana y establecimiento de sistemas de organización claros",
    ),
    RecommendationRule(
        factor="Q4", at_least=8,
        text="Evaluación de factores de estrés laboral y posibles intervenciones",
    ),
    RecommendationRule(
        factor="B", at_most=3,
        text="Capacitación adicional y verificación de comprensión de instrucciones",
    ),
)

DEFAULT_RECOMMENDATION = "Perfil adecuado para el rol. Mantener seguimiento periódico."


def get_decatipo_level(decatipo: int) -> DecatipoLevel:
    """Get the five-level reading of a decatipo."""
    if decatipo <= 3:
        return DecatipoLevel.MUY_BAJO
    if decatipo <= 4:
        return DecatipoLevel.BAJO
    if decatipo >= 8:
        return DecatipoLevel.MUY_ALTO
    if decatipo >= 7:
        return DecatipoLevel.ALTO
    return DecatipoLevel.PROMEDIO


def get_factor_band(decatipo: int) -> FactorBand:
    """Get the three-level reading of a decatipo."""
    if decatipo <= 3:
        return FactorBand.BAJO
    if decatipo >= 8:
        return FactorBand.ALTO
    return FactorBand.MEDIO


def get_band_description(factor: FactorDefinition, band: FactorBand) -> str:
    """Get the factor-specific text of a three-level band."""
    if band is FactorBand.BAJO:
        return factor.low_band
    if band is FactorBand.ALTO:
        return factor.high_band
    return factor.medium_band


def get_pole_description(factor: FactorDefinition, decatipo: int) -> str:
    """Get the low or high pole description for a decatipo."""
    return factor.high_pole if decatipo >= HIGH_POLE_FROM else factor.low_pole
