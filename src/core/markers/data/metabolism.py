"""
Carbohydrate and lipid metabolism: glycaemia, HbA1c and the lipid panel.
Lipid targets follow the ESC/EAS cut-offs printed on Portuguese reports.
"""

from ..models import MarkerCategory, MarkerInfo, ReferenceRange

METABOLISM_MARKERS = [
    MarkerInfo(
        name="Glicose",
        aliases=("Glicemia", "Glucose", "Glicose em jejum", "Glicémia"),
        unit="mg/dL",
        category=MarkerCategory.METABOLISM,
        references=(ReferenceRange(min=70, max=110),),
        what_is="Açúcar principal no sangue, fonte de energia do corpo.",
        what_for="Avalia o metabolismo dos açúcares e rastreio de diabetes.",
        high_meaning="Pode indicar diabetes, pré-diabetes ou resistência à insulina.",
        low_meaning="Pode indicar hipoglicemia, jejum prolongado ou excesso de insulina.",
        common_causes=("Diabetes", "Pré-diabetes", "Hipoglicemia", "Jejum prolongado"),
    ),
    MarkerInfo(
        name="HbA1c",
        aliases=("Hemoglobina Glicada", "Hemoglobina A1c", "A1C"),
        unit="%",
        category=MarkerCategory.METABOLISM,
        references=(ReferenceRange(min=4.0, max=6.0),),
        what_is="Hemoglobina ligada à glicose, reflete média de glicemia dos últimos 2-3 meses.",
        what_for="Monitorização do controlo glicémico em diabéticos.",
        high_meaning="Indica controlo glicémico inadequado ou diabetes mal controlada.",
        low_meaning=(
            "Geralmente bom sinal (bom controlo), mas pode indicar anemia "
            "ou hipoglicemia recorrente."
        ),
        common_causes=("Diabetes mal controlada", "Anemia", "Controlo glicémico adequado"),
    ),
    MarkerInfo(
        name="Colesterol Total",
        aliases=("Colesterol", "CT"),
        unit="mg/dL",
        category=MarkerCategory.LIPIDS,
        references=(ReferenceRange(max=190),),
        what_is="Soma de todos os tipos de colesterol no sangue.",
        what_for="Avalia risco cardiovascular.",
        high_meaning="Aumenta risco de doenças cardiovasculares, aterosclerose e enfarte.",
        low_meaning="Geralmente não é preocupante, pode ocorrer em desnutrição ou doenças hepáticas.",
        common_causes=("Dieta rica em gorduras", "Sedentarismo", "Genética", "Diabetes", "Hipotiroidismo"),
    ),
    MarkerInfo(
        name="Colesterol HDL",
        aliases=("HDL", "HDL-Colesterol", "C-HDL"),
        unit="mg/dL",
        category=MarkerCategory.LIPIDS,
        references=(ReferenceRange(min=40),),
        what_is="Colesterol 'bom', remove excesso de colesterol das artérias.",
        what_for="Protege contra doenças cardiovasculares.",
        high_meaning="Excelente! Quanto mais alto, melhor proteção cardiovascular.",
        low_meaning="Aumenta risco de doenças cardiovasculares.",
        common_causes=("Sedentarismo", "Tabagismo", "Diabetes", "Obesidade"),
    ),
    MarkerInfo(
        name="Colesterol LDL",
        aliases=("LDL", "LDL-Colesterol", "C-LDL"),
        unit="mg/dL",
        category=MarkerCategory.LIPIDS,
        references=(ReferenceRange(max=115),),
        what_is="Colesterol 'mau', deposita-se nas artérias.",
        what_for="Principal fator de risco para aterosclerose.",
        high_meaning="Aumenta significativamente risco de enfarte e AVC.",
        low_meaning="Excelente para prevenção cardiovascular.",
        common_causes=("Dieta rica em gorduras saturadas", "Sedentarismo", "Genética", "Diabetes"),
    ),
    MarkerInfo(
        name="Triglicéridos",
        aliases=("TG", "Triglicerídeos"),
        unit="mg/dL",
        category=MarkerCategory.LIPIDS,
        references=(ReferenceRange(max=150),),
        what_is="Tipo de gordura armazenada no corpo, vinda da alimentação.",
        what_for="Avalia risco cardiovascular e metabólico.",
        high_meaning="Aumenta risco de doenças cardiovasculares, pancreatite e síndrome metabólico.",
        low_meaning="Geralmente bom sinal.",
        common_causes=("Dieta rica em açúcares", "Álcool", "Obesidade", "Diabetes", "Sedentarismo"),
    ),
]
