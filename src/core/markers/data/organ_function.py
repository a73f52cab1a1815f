"""
Organ function panels: renal, hepatic and thyroid markers.
"""

from ..models import MarkerCategory, MarkerInfo, ReferenceRange, Sex

_M = Sex.MALE
_F = Sex.FEMALE

ORGAN_FUNCTION_MARKERS = [
    # --- Renal ---
    MarkerInfo(
        name="Ureia",
        aliases=("BUN", "Azoto Ureico", "Urémia"),
        unit="mg/dL",
        category=MarkerCategory.RENAL,
        references=(ReferenceRange(min=15, max=50),),
        what_is="Produto de degradação das proteínas, eliminado pelos rins.",
        what_for="Avalia função renal e estado de hidratação.",
        high_meaning="Pode indicar insuficiência renal, desidratação ou dieta muito rica em proteínas.",
        low_meaning="Pode indicar má nutrição, doença hepática ou excesso de hidratação.",
        common_causes=("Insuficiência renal", "Desidratação", "Dieta rica em proteínas", "Doença hepática"),
    ),
    MarkerInfo(
        name="Creatinina",
        aliases=("Creat", "Creatininémia"),
        unit="mg/dL",
        category=MarkerCategory.RENAL,
        references=(
            ReferenceRange(min=0.70, max=1.30, sex=_M),
            ReferenceRange(min=0.50, max=1.10, sex=_F),
        ),
        what_is="Produto de degradação muscular, eliminado pelos rins.",
        what_for="Principal marcador da função renal.",
        high_meaning="Indica insuficiência renal ou desidratação.",
        low_meaning="Pode ocorrer em pessoas com baixa massa muscular.",
        common_causes=("Insuficiência renal", "Desidratação", "Exercício físico intenso", "Baixa massa muscular"),
    ),
    MarkerInfo(
        name="Ácido Úrico",
        aliases=("Urato", "Uricemia"),
        unit="mg/dL",
        category=MarkerCategory.RENAL,
        references=(
            ReferenceRange(min=3.5, max=7.2, sex=_M),
            ReferenceRange(min=2.6, max=6.0, sex=_F),
        ),
        what_is="Produto final do metabolismo de purinas (carnes, peixes, álcool).",
        what_for="Avalia risco de gota e função renal.",
        high_meaning="Pode causar gota (cristais nas articulações) ou cálculos renais.",
        low_meaning="Geralmente sem significado clínico.",
        common_causes=("Gota", "Dieta rica em purinas", "Álcool", "Insuficiência renal", "Diuréticos"),
    ),
    # --- Hepatic ---
    MarkerInfo(
        name="AST",
        aliases=("TGO", "GOT", "Aspartato Aminotransferase", "Aspartato aminotransferase (AST)"),
        unit="U/L",
        category=MarkerCategory.HEPATIC,
        references=(ReferenceRange(max=34),),
        what_is="Enzima presente no fígado, coração e músculos.",
        what_for="Avalia lesão hepática ou cardíaca.",
        high_meaning="Pode indicar hepatite, cirrose, enfarte do miocárdio ou lesão muscular.",
        low_meaning="Geralmente sem significado clínico.",
        common_causes=("Hepatite", "Álcool", "Esteatose hepática", "Medicamentos", "Enfarte"),
    ),
    MarkerInfo(
        name="ALT",
        aliases=("TGP", "GPT", "Alanina Aminotransferase", "Alanina aminotransferase (ALT)"),
        unit="U/L",
        category=MarkerCategory.HEPATIC,
        references=(ReferenceRange(min=10, max=49),),
        what_is="Enzima mais específica do fígado que a AST.",
        what_for="Principal marcador de lesão hepática.",
        high_meaning="Indica lesão ou inflamação do fígado (hepatite, esteatose, medicamentos).",
        low_meaning="Geralmente bom sinal.",
        common_causes=("Hepatite", "Esteatose hepática", "Álcool", "Medicamentos", "Obesidade"),
    ),
    MarkerInfo(
        name="GGT",
        aliases=("Gama GT", "γ-GT", "Gama-glutamiltransferase", "Gama-GT"),
        unit="U/L",
        category=MarkerCategory.HEPATIC,
        references=(
            ReferenceRange(max=55, sex=_M),
            ReferenceRange(max=38, sex=_F),
        ),
        what_is="Enzima do fígado sensível ao álcool e medicamentos.",
        what_for="Avalia lesão hepática, especialmente relacionada ao álcool.",
        high_meaning="Pode indicar doença hepática, consumo de álcool ou obstrução biliar.",
        low_meaning="Geralmente bom sinal.",
        common_causes=("Álcool", "Esteatose hepática", "Medicamentos", "Doenças biliares"),
    ),
    MarkerInfo(
        name="Fosfatase Alcalina",
        aliases=("FA", "ALP"),
        unit="U/L",
        category=MarkerCategory.HEPATIC,
        references=(ReferenceRange(min=40, max=130),),
        what_is="Enzima presente no fígado e ossos.",
        what_for="Avalia doenças hepáticas ou ósseas.",
        high_meaning=(
            "Pode indicar doenças biliares, metástases ósseas ou crescimento "
            "ósseo (crianças/adolescentes)."
        ),
        low_meaning="Pode indicar desnutrição ou deficiência de zinco.",
        common_causes=("Doenças biliares", "Metástases ósseas", "Hepatite", "Crescimento ósseo"),
    ),
    MarkerInfo(
        name="Bilirrubina Total",
        aliases=("BT", "Bilirrubina"),
        unit="mg/dL",
        category=MarkerCategory.HEPATIC,
        references=(ReferenceRange(max=1.2),),
        what_is="Produto da degradação da hemoglobina.",
        what_for="Avalia função hepática e vias biliares.",
        high_meaning=(
            "Pode causar icterícia (pele amarela) e indicar doença hepática "
            "ou obstrução biliar."
        ),
        low_meaning="Geralmente sem significado clínico.",
        common_causes=("Hepatite", "Cirrose", "Cálculos biliares", "Hemólise", "Síndrome de Gilbert"),
    ),
    # --- Thyroid ---
    MarkerInfo(
        name="TSH",
        aliases=("Tirotrofina", "Hormona Tireoestimulante", "Tireoestimulina (TSH)", "Tireoestimulina"),
        unit="mUI/L",
        category=MarkerCategory.THYROID,
        references=(ReferenceRange(min=0.35, max=5.50),),
        what_is="Hormona produzida pela hipófise que regula a tiroide.",
        what_for="Principal exame para avaliar função tiroideia.",
        high_meaning="Indica hipotiroidismo (tiroide lenta).",
        low_meaning="Indica hipertiroidismo (tiroide acelerada).",
        common_causes=("Hipotiroidismo", "Hipertiroidismo", "Doença de Hashimoto", "Doença de Graves"),
    ),
    MarkerInfo(
        name="T4 Livre",
        aliases=("FT4", "T4L", "Tiroxina Livre", "Tiroxina Livre (FT4)"),
        unit="ng/dL",
        category=MarkerCategory.THYROID,
        references=(ReferenceRange(min=0.80, max=1.76),),
        what_is="Hormona produzida pela tiroide na forma livre (ativa).",
        what_for="Avalia função tiroideia juntamente com o TSH.",
        high_meaning="Pode indicar hipertiroidismo.",
        low_meaning="Pode indicar hipotiroidismo.",
        common_causes=("Hipertiroidismo", "Hipotiroidismo", "Medicamentos para tiroide"),
    ),
    MarkerInfo(
        name="T3 Livre",
        aliases=("FT3", "T3L", "Triiodotironina Livre"),
        unit="pg/mL",
        category=MarkerCategory.THYROID,
        references=(ReferenceRange(min=2.3, max=4.2),),
        what_is="Hormona tiroideia mais ativa que o T4.",
        what_for="Avalia hipertiroidismo e monitorização de tratamento.",
        high_meaning="Pode indicar hipertiroidismo.",
        low_meaning="Pode indicar hipotiroidismo ou doença grave.",
        common_causes=("Hipertiroidismo", "Hipotiroidismo", "Doença de Graves"),
    ),
]
