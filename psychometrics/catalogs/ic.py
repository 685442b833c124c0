"""Interpretation catalog of the IC complex-instructions test.

Bands are set on the percentage of expected marks found. On the 20-mark
table the cut points fall at 17, 13, 9 and 5 marks.
"""

from typing import Tuple

from psychometrics.catalogs.base import Band

CATALOG_VERSION = "ic-1.0"


class ComprehensionBand(Band):
    """Comprehension band with the capabilities it implies."""

    capabilities: Tuple[str, ...]


BANDS: Tuple[ComprehensionBand, ...] = (
    ComprehensionBand(
        code="MUY_ALTO",
        label="Muy Alto",
        min_score=85,
        description="Excelente nivel de comprensión lógica y atención al detalle",
        capabilities=(
            "Excelente comprensión de instrucciones complejas",
            "Alta capacidad de análisis de criterios múltiples simultáneos",
            "Atención excepcional al detalle",
            "Razonamiento lógico superior aplicado a datos estructurados",
            "Procesamiento eficiente de información compleja",
        ),
        recommendations=(
            "Apto para roles que requieren análisis complejo de información",
            "Capacidad para manejar procedimientos detallados y multi-criterio",
            "Adecuado para posiciones de control de calidad y auditoría",
            "Puede supervisar procesos que requieren alta precisión",
        ),
    ),
    ComprehensionBand(
        code="ALTO",
        label="Alto",
        min_score=65,
        description="Buena comprensión y atención",
        capabilities=(
            "Buena comprensión de instrucciones complejas",
            "Capacidad sólida para aplicar múltiples criterios",
            "Atención al detalle adecuada",
            "Buen razonamiento lógico",
        ),
        recommendations=(
            "Apto para roles operativos con procedimientos detallados",
            "Puede manejar tareas que requieren seguir instrucciones específicas",
            "Adecuado para posiciones administrativas con normativas",
            "Capacidad para roles de cumplimiento y verificación",
        ),
    ),
    ComprehensionBand(
        code="PROMEDIO",
        label="Promedio",
        min_score=45,
        description="Comprensión adecuada, algunos errores por descuido",
        capabilities=(
            "Comprensión básica de instrucciones complejas",
            "Puede aplicar criterios con supervisión",
            "Atención al detalle variable",
            "Razonamiento lógico funcional",
        ),
        recommendations=(
            "Apto para roles con instrucciones claras y estructuradas",
            "Beneficiaría de capacitación en procedimientos",
            "Requiere supervisión en tareas complejas",
            "Puede mejorar con práctica y retroalimentación",
        ),
    ),
    ComprehensionBand(
        code="BAJO",
        label="Bajo",
        min_score=25,
        description="Dificultad moderada, errores frecuentes de interpretación",
        capabilities=(
            "Dificultad con instrucciones complejas",
            "Errores frecuentes al aplicar múltiples criterios",
            "Atención al detalle inconsistente",
            "Requiere instrucciones simplificadas",
        ),
        recommendations=(
            "Apto para roles operativos simples con instrucciones paso a paso",
            "Requiere capacitación intensiva y supervisión cercana",
            "Beneficiaría de procedimientos visuales y simplificados",
            "Considerar asignación a tareas con criterios únicos y claros",
        ),
    ),
    ComprehensionBand(
        code="MUY_BAJO",
        label="Muy Bajo",
        description="Dificultad notable para seguir instrucciones complejas",
        capabilities=(
            "Dificultad significativa con instrucciones complejas",
            "No puede aplicar múltiples criterios simultáneamente",
            "Baja atención al detalle",
            "Requiere instrucciones muy simples y directas",
        ),
        recommendations=(
            "Apto solo para roles operativos muy simples",
            "Requiere capacitación exhaustiva con acompañamiento",
            "Necesita supervisión constante",
            "Instrucciones deben ser extremadamente claras y únicas",
            "Evaluar si requiere apoyo adicional para cumplir requisitos del puesto",
        ),
    ),
)

# Prefix of the per-column entries in the raw scores
COLUMN_SCORE_PREFIX = "column:"
