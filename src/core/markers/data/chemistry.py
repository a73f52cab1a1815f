"""
Inflammation markers, electrolytes and hormones.
"""

from ..models import MarkerCategory, MarkerInfo, ReferenceRange, Sex

_M = Sex.MALE
_F = Sex.FEMALE

CHEMISTRY_MARKERS = [
    # --- Inflammation ---
    MarkerInfo(
        name="PCR",
        aliases=("Proteína C Reactiva", "CRP", "Proteína C Reativa"),
        unit="mg/L",
        category=MarkerCategory.INFLAMMATION,
        references=(ReferenceRange(max=5.0),),
        what_is="Proteína produzida pelo fígado em resposta a inflamação.",
        what_for="Marcador geral de inflamação ou infeção.",
        high_meaning=(
            "Indica inflamação ativa, infeção, doença autoimune ou risco "
            "cardiovascular elevado."
        ),
        low_meaning="Ausência de inflamação significativa.",
        common_causes=("Infeção", "Doenças autoimunes", "Inflamação crónica", "Risco cardiovascular"),
    ),
    MarkerInfo(
        name="VS",
        aliases=("Velocidade de Sedimentação", "ESR", "VHS"),
        unit="mm/h",
        category=MarkerCategory.INFLAMMATION,
        references=(
            ReferenceRange(max=15, sex=_M),
            ReferenceRange(max=20, sex=_F),
        ),
        what_is="Velocidade com que os glóbulos vermelhos se depositam num tubo.",
        what_for="Marcador inespecífico de inflamação.",
        high_meaning="Indica inflamação, infeção, anemia ou doenças autoimunes.",
        low_meaning="Ausência de inflamação.",
        common_causes=("Infeção", "Doenças autoimunes", "Anemia", "Cancro"),
    ),
    # --- Electrolytes ---
    MarkerInfo(
        name="Sódio",
        aliases=("Na", "Natrémia", "Natremia"),
        unit="mmol/L",
        category=MarkerCategory.ELECTROLYTES,
        references=(ReferenceRange(min=132, max=146),),
        what_is="Principal eletrólito extracelular, regula volume de líquidos.",
        what_for="Avalia equilíbrio hídrico e função renal.",
        high_meaning="Desidratação, diabetes insípida ou excesso de sal.",
        low_meaning="Excesso de hidratação, insuficiência cardíaca ou renal, diuréticos.",
        common_causes=("Desidratação", "Excesso de hidratação", "Diuréticos", "Diarreia", "Vómitos"),
    ),
    MarkerInfo(
        name="Potássio",
        aliases=("K", "Kaliémia", "Kaliemia"),
        unit="mmol/L",
        category=MarkerCategory.ELECTROLYTES,
        references=(ReferenceRange(min=3.5, max=5.5),),
        what_is="Eletrólito essencial para função cardíaca e muscular.",
        what_for="Avalia função renal e risco de arritmias.",
        high_meaning="Pode causar arritmias graves, geralmente por insuficiência renal ou medicamentos.",
        low_meaning=(
            "Pode causar fraqueza muscular, cãibras e arritmias, geralmente "
            "por diuréticos ou diarreia."
        ),
        common_causes=("Insuficiência renal", "Diuréticos", "Diarreia", "Vómitos", "Medicamentos"),
    ),
    MarkerInfo(
        name="Cloro",
        aliases=("Cl", "Clorémia", "Cloremia"),
        unit="mmol/L",
        category=MarkerCategory.ELECTROLYTES,
        references=(ReferenceRange(min=99, max=109),),
        what_is="Eletrólito que acompanha o sódio.",
        what_for="Avalia equilíbrio ácido-base e hidratação.",
        high_meaning="Desidratação, acidose ou problemas renais.",
        low_meaning="Vómitos, alcalose ou excesso de hidratação.",
        common_causes=("Desidratação", "Vómitos", "Diarreia", "Problemas renais"),
    ),
    MarkerInfo(
        name="Cálcio",
        aliases=("Ca", "Calcemia", "Cálcio sérico"),
        unit="mg/dL",
        category=MarkerCategory.ELECTROLYTES,
        references=(ReferenceRange(min=8.5, max=10.5),),
        what_is="Mineral essencial para ossos, músculos e nervos.",
        what_for="Avalia saúde óssea, paratiroide e risco de arritmias.",
        high_meaning="Pode indicar hiperparatiroidismo, cancro ou excesso de vitamina D.",
        low_meaning="Pode indicar deficiência de vitamina D, hipoparatiroidismo ou má absorção.",
        common_causes=("Hiperparatiroidismo", "Deficiência de vitamina D", "Cancro", "Má absorção"),
    ),
    MarkerInfo(
        name="Magnésio",
        aliases=("Mg", "Magnesemia", "Magnésio sérico"),
        unit="mg/dL",
        category=MarkerCategory.ELECTROLYTES,
        references=(ReferenceRange(min=1.7, max=2.4),),
        what_is="Mineral importante para músculos, nervos e coração.",
        what_for="Avalia função muscular e cardíaca.",
        high_meaning="Raro, pode ocorrer com insuficiência renal ou excesso de suplementação.",
        low_meaning="Pode causar cãibras, arritmias e fadiga, comum com diuréticos ou má absorção.",
        common_causes=("Diuréticos", "Má absorção", "Alcoolismo", "Diarreia crónica"),
    ),
    # --- Hormones ---
    MarkerInfo(
        name="Testosterona",
        aliases=("Testosterona Total", "Testosterone"),
        unit="ng/dL",
        category=MarkerCategory.HORMONES,
        references=(
            ReferenceRange(min=300, max=1000, sex=_M),
            ReferenceRange(min=15, max=70, sex=_F),
        ),
        what_is="Principal hormona sexual masculina.",
        what_for="Avalia função sexual, massa muscular e energia.",
        high_meaning="Nas mulheres pode indicar síndrome dos ovários policísticos.",
        low_meaning="Nos homens pode causar fadiga, perda de massa muscular e libido reduzida.",
        common_causes=("Hipogonadismo", "Idade", "Obesidade", "SOP (mulheres)"),
    ),
    MarkerInfo(
        name="Cortisol",
        aliases=("Cortisol sérico",),
        unit="µg/dL",
        category=MarkerCategory.HORMONES,
        references=(ReferenceRange(min=5.0, max=25.0),),
        what_is="Hormona do stress produzida pelas glândulas suprarrenais.",
        what_for="Avalia função das suprarrenais e resposta ao stress.",
        high_meaning="Pode indicar síndrome de Cushing, stress crónico ou medicamentos.",
        low_meaning="Pode indicar insuficiência adrenal (doença de Addison).",
        common_causes=("Síndrome de Cushing", "Stress", "Insuficiência adrenal", "Medicamentos"),
    ),
    MarkerInfo(
        name="PSA",
        aliases=("Antigénio Específico da Próstata", "PSA Total"),
        unit="ng/mL",
        category=MarkerCategory.HORMONES,
        references=(ReferenceRange(max=4.0, sex=_M),),
        what_is="Proteína produzida pela próstata.",
        what_for="Rastreio de cancro da próstata e doenças prostáticas.",
        high_meaning="Pode indicar cancro da próstata, hiperplasia benigna ou prostatite.",
        low_meaning="Geralmente bom sinal.",
        common_causes=("Cancro da próstata", "Hiperplasia benigna", "Prostatite", "Idade"),
    ),
]
