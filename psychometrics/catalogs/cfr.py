"""Interpretation catalog of the CFR risk behaviour inventory."""

from typing import Tuple

from psychometrics.catalogs.base import Band
from psychometrics.utils.constants import AlertLevel

CATALOG_VERSION = "cfr-1.0"


class RiskBand(Band):
    """Risk band with placement guidance."""

    risk_label: str
    profile: str
    placement: str
    fit_for_safety_roles: bool
    fit_for_critical_operations: bool
    training_required: bool
    alert_level: AlertLevel


BANDS: Tuple[RiskBand, ...] = (
    RiskBand(
        code="ALTO",
        label="Alto",
        min_score=200,
        min_exclusive=True,
        risk_label="IMPULSIVO",
        description="Nivel alto de conducta de riesgo",
        profile=(
            "Tendencia marcada a la impulsividad y búsqueda de sensaciones. "
            "Puede tomar decisiones sin evaluar completamente las consecuencias. "
            "Disfruta de situaciones de alta adrenalina y puede minimizar riesgos reales."
        ),
        placement=(
            "NO RECOMENDADO para roles críticos de seguridad sin intervención previa. "
            "Requiere capacitación intensiva en gestión de riesgos, control de impulsos y "
            "protocolos de seguridad. Se sugiere evaluación adicional antes de asignar a "
            "operaciones críticas."
        ),
        characteristics=(
            "Dispuesto a tomar riesgos calculados",
            "Actúa rápidamente en situaciones inciertas",
            "Busca soluciones innovadoras",
            "Cómodo con ambigüedad e incertidumbre",
            "Puede priorizar velocidad sobre precaución",
        ),
        recommendations=(
            "Requiere supervisión en ambientes de alto riesgo",
            "Necesita capacitación reforzada en seguridad",
            "Puede beneficiar de protocolos estrictos",
            "Considerar roles administrativos o de apoyo sin exposición a riesgos operacionales",
        ),
        fit_for_safety_roles=False,
        fit_for_critical_operations=False,
        training_required=True,
        alert_level=AlertLevel.DANGER,
    ),
    RiskBand(
        code="MEDIO",
        label="Medio",
        min_score=120,
        min_exclusive=True,
        risk_label="MODERADO",
        description="Nivel moderado de conducta de riesgo",
        profile=(
            "Asume riesgos moderados con balance entre prudencia y acción. "
            "Puede tomar decisiones con cierto nivel de riesgo calculado. "
            "Requiere refuerzo en procedimientos de seguridad y protocolos."
        ),
        placement=(
            "ACEPTABLE para roles operativos con supervisión adecuada y capacitación continua. "
            "Recomendado para: mantenimiento, logística, roles operativos con protocolos claros."
        ),
        characteristics=(
            "Balance entre precaución y toma de riesgos",
            "Evalúa riesgos antes de actuar",
            "Flexible según el contexto",
            "Puede adaptarse a diferentes situaciones",
            "Considera tanto seguridad como eficiencia",
        ),
        recommendations=(
            "Apto para roles con nivel moderado de riesgo",
            "Requiere entrenamiento específico en seguridad y monitoreo periódico",
            "Puede supervisar y ejecutar tareas variadas",
            "Capacidad de adaptación a diferentes contextos",
        ),
        fit_for_safety_roles=False,
        fit_for_critical_operations=False,
        training_required=True,
        alert_level=AlertLevel.WARNING,
    ),
    RiskBand(
        code="BAJO",
        label="Bajo",
        risk_label="PRUDENTE",
        description="Nivel bajo de conducta de riesgo",
        profile=(
            "Persona prudente, reflexiva y con alta conciencia de consecuencias. "
            "Toma decisiones cuidadosamente evaluando riesgos. "
            "Evita situaciones de riesgo innecesario y prefiere la seguridad y estabilidad."
        ),
        placement=(
            "IDEAL para roles con altos estándares de seguridad: operación de equipos pesados, "
            "manejo de explosivos, trabajo en altura, roles de seguridad y supervisión."
        ),
        characteristics=(
            "Prefiere entornos seguros y predecibles",
            "Evita tomar riesgos innecesarios",
            "Sigue procedimientos establecidos",
            "Prioriza la seguridad sobre la velocidad",
            "Pensamiento cauteloso antes de actuar",
        ),
        recommendations=(
            "Ideal para roles que requieren alta atención a seguridad",
            "Excelente para posiciones con protocolos estrictos",
            "Adecuado para ambientes regulados",
            "Puede requerir apoyo en situaciones de cambio rápido",
        ),
        fit_for_safety_roles=True,
        fit_for_critical_operations=True,
        training_required=False,
        alert_level=AlertLevel.SUCCESS,
    ),
)
