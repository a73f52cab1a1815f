"""
Hemograma: red cell, white cell and platelet markers.
Reference values as printed by Portuguese clinical laboratories (adults).
"""

from ..models import MarkerCategory, MarkerInfo, ReferenceRange, Sex

_CAT = MarkerCategory.HEMATOLOGY
_M = Sex.MALE
_F = Sex.FEMALE

HEMATOLOGY_MARKERS = [
    MarkerInfo(
        name="Hemoglobina",
        aliases=("HGB", "Hb", "Hemoglobina (HGB)"),
        unit="g/dL",
        category=_CAT,
        references=(
            ReferenceRange(min=13.0, max=17.0, sex=_M),
            ReferenceRange(min=12.0, max=16.0, sex=_F),
        ),
        what_is="Proteína presente nos glóbulos vermelhos do sangue.",
        what_for="Responsável por transportar oxigénio dos pulmões para todos os tecidos do corpo.",
        high_meaning="Pode indicar desidratação, viver em altitude elevada, doenças pulmonares ou policitemia.",
        low_meaning=(
            "Pode indicar anemia (falta de ferro, vitamina B12 ou ácido fólico), "
            "perda de sangue ou doenças crónicas."
        ),
        common_causes=("Anemia ferropénica", "Perda de sangue", "Deficiência de B12", "Desidratação", "Doenças pulmonares"),
    ),
    MarkerInfo(
        name="Eritrócitos",
        aliases=("RBC", "Glóbulos Vermelhos", "Eritrócitos (RBC)"),
        unit="x10⁶/µL",
        category=_CAT,
        references=(
            ReferenceRange(min=4.5, max=5.5, sex=_M),
            ReferenceRange(min=4.0, max=5.0, sex=_F),
        ),
        what_is="Glóbulos vermelhos, as células que transportam a hemoglobina.",
        what_for="Transportam oxigénio e dióxido de carbono pelo corpo.",
        high_meaning="Pode indicar policitemia, desidratação ou viver em altitude.",
        low_meaning="Pode indicar anemia, perda de sangue ou doenças da medula óssea.",
        common_causes=("Anemia", "Desidratação", "Doenças da medula óssea", "Perda de sangue"),
    ),
    MarkerInfo(
        name="Hematócrito",
        aliases=("HCT", "Ht", "Hematócrito (HCT)"),
        unit="%",
        category=_CAT,
        references=(
            ReferenceRange(min=40.0, max=50.0, sex=_M),
            ReferenceRange(min=36.0, max=44.0, sex=_F),
        ),
        what_is="Percentagem do volume de sangue ocupada pelos glóbulos vermelhos.",
        what_for="Avalia a capacidade do sangue transportar oxigénio.",
        high_meaning="Pode indicar desidratação, policitemia ou doenças pulmonares.",
        low_meaning="Pode indicar anemia, perda de sangue ou excesso de hidratação.",
        common_causes=("Anemia", "Desidratação", "Perda de sangue", "Policitemia"),
    ),
    MarkerInfo(
        name="V.G.M.",
        aliases=("VGM", "MCV", "Volume Globular Médio"),
        unit="fL",
        category=_CAT,
        references=(ReferenceRange(min=80.0, max=97.0),),
        what_is="Volume médio de cada glóbulo vermelho.",
        what_for="Ajuda a classificar o tipo de anemia (micro, normo ou macrocítica).",
        high_meaning="Anemias macrocíticas (deficiência de B12 ou ácido fólico, alcoolismo).",
        low_meaning="Anemias microcíticas (deficiência de ferro, talassemia).",
        common_causes=("Deficiência de ferro", "Deficiência de B12", "Alcoolismo", "Talassemia"),
    ),
    MarkerInfo(
        name="H.G.M.",
        aliases=("HGM", "MCH", "Hemoglobina Globular Média"),
        unit="pg",
        category=_CAT,
        references=(ReferenceRange(min=27.0, max=32.0),),
        what_is="Quantidade média de hemoglobina em cada glóbulo vermelho.",
        what_for="Complementa o VGM na classificação de anemias.",
        high_meaning="Geralmente acompanha VGM elevado (anemias macrocíticas).",
        low_meaning="Geralmente acompanha VGM baixo (anemias microcíticas).",
        common_causes=("Deficiência de ferro", "Deficiência de B12", "Talassemia"),
    ),
    MarkerInfo(
        name="C.M.H.G.",
        aliases=("CMHG", "MCHC", "Concentração Média de Hemoglobina Globular"),
        unit="g/dL",
        category=_CAT,
        references=(ReferenceRange(min=32.0, max=36.0),),
        what_is="Concentração média de hemoglobina dentro dos glóbulos vermelhos.",
        what_for="Avalia se os glóbulos vermelhos têm hemoglobina em concentração normal.",
        high_meaning="Raro, pode indicar esferocitose hereditária.",
        low_meaning="Pode indicar anemia ferropénica ou talassemia.",
        common_causes=("Anemia ferropénica", "Talassemia", "Esferocitose"),
    ),
    MarkerInfo(
        name="R.D.W.",
        aliases=("RDW", "Amplitude de Distribuição dos Eritrócitos"),
        unit="%",
        category=_CAT,
        references=(ReferenceRange(min=11.6, max=14.0),),
        what_is="Variação no tamanho dos glóbulos vermelhos.",
        what_for="Ajuda a identificar diferentes tipos de anemia.",
        high_meaning=(
            "Indica variação significativa no tamanho dos glóbulos "
            "(deficiência de ferro, B12, ou anemia mista)."
        ),
        low_meaning="Glóbulos vermelhos com tamanho uniforme (normal ou talassemia).",
        common_causes=("Deficiência de ferro", "Deficiência de B12", "Anemia mista"),
    ),
    MarkerInfo(
        name="Leucócitos",
        aliases=("WBC", "Glóbulos Brancos", "Leucócitos (WBC)"),
        unit="x10³/µL",
        category=_CAT,
        references=(ReferenceRange(min=4.0, max=10.0),),
        what_is="Glóbulos brancos, células de defesa do organismo.",
        what_for="Protegem o corpo contra infeções e doenças.",
        high_meaning="Pode indicar infeção, inflamação, leucemia ou stress físico.",
        low_meaning="Pode indicar infeção viral, doenças da medula óssea ou efeito de medicamentos.",
        common_causes=("Infeção", "Inflamação", "Leucemia", "Infeção viral", "Medicamentos"),
    ),
    MarkerInfo(
        name="Neutrófilos",
        aliases=("Neutrophils", "Segmentados"),
        unit="%",
        category=_CAT,
        references=(ReferenceRange(min=40.0, max=80.0),),
        what_is="Tipo de glóbulo branco mais abundante.",
        what_for="Primeira linha de defesa contra infeções bacterianas.",
        high_meaning="Geralmente indica infeção bacteriana aguda ou inflamação.",
        low_meaning="Pode indicar infeção viral, medicamentos ou doenças da medula.",
        common_causes=("Infeção bacteriana", "Infeção viral", "Medicamentos", "Inflamação"),
    ),
    MarkerInfo(
        name="Linfócitos",
        aliases=("Lymphocytes",),
        unit="%",
        category=_CAT,
        references=(ReferenceRange(min=20.0, max=40.0),),
        what_is="Tipo de glóbulo branco responsável pela imunidade específica.",
        what_for="Produzem anticorpos e destroem células infetadas ou cancerosas.",
        high_meaning="Pode indicar infeção viral, leucemia linfocítica ou mononucleose.",
        low_meaning="Pode indicar imunossupressão, HIV ou efeito de medicamentos.",
        common_causes=("Infeção viral", "Leucemia", "HIV", "Imunossupressão"),
    ),
    MarkerInfo(
        name="Monócitos",
        aliases=("Monocytes",),
        unit="%",
        category=_CAT,
        references=(ReferenceRange(min=2.0, max=10.0),),
        what_is="Tipo de glóbulo branco que se transforma em macrófagos.",
        what_for="Limpam tecidos de células mortas e combatem infeções crónicas.",
        high_meaning="Pode indicar infeções crónicas, tuberculose ou doenças autoimunes.",
        low_meaning="Geralmente sem significado clínico relevante.",
        common_causes=("Infeções crónicas", "Tuberculose", "Doenças autoimunes"),
    ),
    MarkerInfo(
        name="Eosinófilos",
        aliases=("Eosinophils",),
        unit="%",
        category=_CAT,
        references=(ReferenceRange(min=1.0, max=6.0),),
        what_is="Tipo de glóbulo branco envolvido em reações alérgicas.",
        what_for="Combatem parasitas e participam em reações alérgicas.",
        high_meaning="Pode indicar alergias, asma, parasitas ou doenças de pele.",
        low_meaning="Geralmente sem significado clínico.",
        common_causes=("Alergias", "Asma", "Parasitas", "Doenças de pele"),
    ),
    MarkerInfo(
        name="Basófilos",
        aliases=("Basophils",),
        unit="%",
        category=_CAT,
        references=(ReferenceRange(min=0.0, max=2.0),),
        what_is="Tipo de glóbulo branco menos comum.",
        what_for="Envolvidos em reações alérgicas e libertam histamina.",
        high_meaning="Raro, pode indicar leucemia ou reações alérgicas graves.",
        low_meaning="Geralmente sem significado clínico.",
        common_causes=("Reações alérgicas", "Leucemia"),
    ),
    MarkerInfo(
        name="Plaquetas",
        aliases=("PLT", "Trombócitos", "Plaquetas (PLT)"),
        unit="x10³/µL",
        category=_CAT,
        references=(ReferenceRange(min=150, max=400),),
        what_is="Células responsáveis pela coagulação do sangue.",
        what_for="Formam coágulos para parar hemorragias.",
        high_meaning="Pode indicar inflamação, anemia ferropénica ou doenças mieloproliferativas.",
        low_meaning="Pode indicar risco de hemorragia, doenças da medula ou destruição plaquetária.",
        common_causes=("Inflamação", "Doenças da medula", "Destruição imunológica", "Medicamentos"),
    ),
]
