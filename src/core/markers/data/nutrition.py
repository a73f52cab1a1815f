"""
Iron metabolism and vitamins.
"""

from ..models import MarkerCategory, MarkerInfo, ReferenceRange, Sex

NUTRITION_MARKERS = [
    MarkerInfo(
        name="Ferro",
        aliases=("Fe", "Ferro sérico", "Ferro serico"),
        unit="µg/dL",
        category=MarkerCategory.IRON,
        references=(
            ReferenceRange(min=65, max=175, sex=Sex.MALE),
            ReferenceRange(min=50, max=170, sex=Sex.FEMALE),
        ),
        what_is="Mineral essencial para produção de hemoglobina.",
        what_for="Avalia anemia ferropénica e sobrecarga de ferro.",
        high_meaning="Pode indicar hemocromatose (sobrecarga de ferro) ou hemólise.",
        low_meaning="Indica deficiência de ferro, principal causa de anemia.",
        common_causes=("Anemia ferropénica", "Hemocromatose", "Dieta pobre em ferro", "Perda de sangue"),
    ),
    MarkerInfo(
        name="Ferritina",
        aliases=("Ferrit",),
        unit="ng/mL",
        category=MarkerCategory.IRON,
        references=(
            ReferenceRange(min=30, max=400, sex=Sex.MALE),
            ReferenceRange(min=15, max=150, sex=Sex.FEMALE),
        ),
        what_is="Proteína que armazena ferro no corpo.",
        what_for="Melhor marcador das reservas de ferro.",
        high_meaning="Pode indicar inflamação, hemocromatose ou doenças hepáticas.",
        low_meaning="Indica reservas baixas de ferro, mesmo antes de anemia manifesta.",
        common_causes=("Deficiência de ferro", "Hemocromatose", "Inflamação", "Doenças hepáticas"),
    ),
    MarkerInfo(
        name="Transferrina",
        aliases=("Transferrin",),
        unit="mg/dL",
        category=MarkerCategory.IRON,
        references=(ReferenceRange(min=200, max=360),),
        what_is="Proteína que transporta ferro no sangue.",
        what_for="Avalia metabolismo do ferro.",
        high_meaning="Geralmente indica deficiência de ferro (corpo tenta compensar).",
        low_meaning="Pode indicar inflamação, má nutrição ou sobrecarga de ferro.",
        common_causes=("Deficiência de ferro", "Inflamação", "Má nutrição"),
    ),
    MarkerInfo(
        name="Vitamina D",
        aliases=("25-OH Vitamina D", "25-Hidroxivitamina D", "Calcidiol", "Vitamina D3"),
        unit="ng/mL",
        category=MarkerCategory.VITAMINS,
        references=(ReferenceRange(min=30, max=100),),
        what_is="Vitamina essencial para absorção de cálcio e saúde óssea.",
        what_for="Previne osteoporose, regula imunidade e humor.",
        high_meaning="Raro, pode ocorrer com suplementação excessiva (toxicidade rara).",
        low_meaning=(
            "Muito comum em Portugal, aumenta risco de osteoporose, fraturas "
            "e problemas imunológicos."
        ),
        common_causes=("Pouca exposição solar", "Dieta pobre", "Má absorção", "Obesidade"),
    ),
    MarkerInfo(
        name="Vitamina B12",
        aliases=("Cianocobalamina", "Cobalamina", "B12"),
        unit="pg/mL",
        category=MarkerCategory.VITAMINS,
        references=(ReferenceRange(min=200, max=900),),
        what_is="Vitamina essencial para produção de glóbulos vermelhos e função nervosa.",
        what_for="Previne anemia megaloblástica e problemas neurológicos.",
        high_meaning="Geralmente sem significado clínico, pode ocorrer com suplementação.",
        low_meaning="Pode causar anemia, fadiga, formigueiros e problemas de memória.",
        common_causes=("Vegetarianismo/veganismo", "Má absorção", "Gastrite atrófica", "Idade avançada"),
    ),
    MarkerInfo(
        name="Ácido Fólico",
        aliases=("Folato", "Vitamina B9", "B9"),
        unit="ng/mL",
        category=MarkerCategory.VITAMINS,
        references=(ReferenceRange(min=3.0, max=17.0),),
        what_is="Vitamina do complexo B, essencial para produção de DNA e glóbulos vermelhos.",
        what_for="Previne anemia megaloblástica e malformações fetais.",
        high_meaning="Geralmente sem significado clínico, pode mascarar deficiência de B12.",
        low_meaning="Pode causar anemia, fadiga e malformações fetais na gravidez.",
        common_causes=("Dieta pobre em vegetais", "Alcoolismo", "Má absorção", "Gravidez"),
    ),
]
