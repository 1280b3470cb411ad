# Offline word bank used when the remote word generator is unavailable.
# Keys are lowercase theme identifiers; unknown keys draw from every table.

import random
from typing import Dict, List, Optional

from ..sanitize import sanitize_word

RANDOM_THEME = "aleatorio"

WORD_LISTS: Dict[str, List[str]] = {
    "animais": [
        "LEAO", "TIGRE", "ELEFANTE", "GIRAFA", "MACACO", "ZEBRA", "HIPOPOTAMO", "RINOCERONTE", "CROCODILO", "JACARE",
        "CAPIVARA", "TATU", "ONCA", "LOBO", "RAPOSA", "URSO", "PANDA", "CANGURU", "COALA", "PREGUICA",
        "GATO", "CACHORRO", "HAMSTER", "COELHO", "CAVALO", "PORCO", "OVELHA", "CABRA", "GALINHA", "PATO",
        "PERU", "GANSO", "AVESTRUZ", "PINGUIM", "AGUIA", "FALCAO", "CORUJA", "GAVIAO", "ARARA", "PAPAGAIO",
        "TUCANO", "PARDAL", "POMBO", "CORVO", "GAIVOTA", "PELICANO", "TUBARAO", "BALEIA", "GOLFINHO", "POLVO",
        "LULA", "CAMARAO", "LAGOSTA", "SIRI", "OSTRA", "PEIXE", "SALMAO", "ATUM", "SARDINHA", "COBRA",
        "LAGARTO", "IGUANA", "CAMALEAO", "JABUTI", "TARTARUGA", "SAPO", "ABELHA", "FORMIGA", "BESOURO", "BORBOLETA",
        "GRILO", "GAFANHOTO", "BARATA", "MOSCA", "ARANHA", "ESCORPIAO", "MINHOCA", "LESMA", "CARACOL", "CARAMUJO",
    ],
    "comidas": [
        "ARROZ", "FEIJAO", "MACARRAO", "LASANHA", "PIZZA", "HAMBURGUER", "BATATA", "MANDIOCA", "INHAME", "ALFACE",
        "TOMATE", "CEBOLA", "ALHO", "PIMENTA", "CENOURA", "BETERRABA", "NABO", "RABANETE", "CHUCHU", "ABOBORA",
        "BERINJELA", "JILO", "QUIABO", "PEPINO", "VAGEM", "ERVILHA", "MILHO", "LENTILHA", "SOJA", "TRIGO",
        "AVEIA", "PAO", "BOLO", "TORTA", "BISCOITO", "BOLACHA", "TORRADA", "SONHO", "QUEIJO", "MANTEIGA",
        "REQUEIJAO", "IOGURTE", "LEITE", "CREME", "SORVETE", "PICOLE", "CARNE", "FRANGO", "LINGUICA", "SALSICHA",
        "PRESUNTO", "BACON", "SALAME", "COSTELA", "PICANHA", "ALCATRA", "MACA", "BANANA", "LARANJA", "UVA",
        "PERA", "ABACAXI", "MELANCIA", "MELAO", "MAMAO", "MANGA", "GOIABA", "CAJU", "ACEROLA", "PITANGA",
        "JABUTICABA", "AMORA", "MORANGO", "FRAMBOESA", "CEREJA",
    ],
    "esportes": [
        "FUTEBOL", "VOLEI", "BASQUETE", "TENIS", "GOLFE", "RUGBY", "HANDEBOL", "NATACAO", "JUDO", "KARATE",
        "BOXE", "JIUJITSU", "CAPOEIRA", "TAEKWONDO", "SUMO", "ESGRIMA", "ATLETISMO", "CORRIDA", "SALTO", "ARREMESSO",
        "MARATONA", "TRIATLO", "PENTATLO", "DECATLO", "MARCHA", "GINASTICA", "TRAMPOLIM", "PARKOUR", "SKATE", "PATINS",
        "CICLISMO", "MOTOCROSS", "ENDURO", "SURF", "BODYBOARD", "WINDSURF", "KITESURF", "ESQUI", "SNOWBOARD", "CANOAGEM",
        "REMO", "VELA", "HIPISMO", "POLO", "RODEIO", "BASEBALL", "CRICKET", "SOFTBALL", "HOCKEY", "BADMINTON",
        "SQUASH", "PINGPONG",
    ],
    "profissoes": [
        "MEDICO", "ENFERMEIRO", "DENTISTA", "VETERINARIO", "PSICOLOGO", "NUTRICIONISTA", "BIOLOGO", "QUIMICO", "FISICO", "PROFESSOR",
        "DIRETOR", "PEDAGOGO", "HISTORIADOR", "GEOGRAFO", "SOCIOLOGO", "FILOSOFO", "MATEMATICO", "ENGENHEIRO", "ARQUITETO", "URBANISTA",
        "DESIGNER", "DECORADOR", "PEDREIRO", "ELETRICISTA", "ENCANADOR", "PINTOR", "CARPINTEIRO", "MARCENEIRO", "MECANICO", "MOTORISTA",
        "PILOTO", "MAQUINISTA", "MARINHEIRO", "ADVOGADO", "JUIZ", "PROMOTOR", "DELEGADO", "POLICIAL", "BOMBEIRO", "GUARDA",
        "DETETIVE", "ESPIAO", "JORNALISTA", "REPORTER", "EDITOR", "ESCRITOR", "POETA", "ATOR", "CANTOR", "MUSICO",
        "BAILARINO", "COZINHEIRO", "CHEF", "GARCOM", "BARMAN", "PADEIRO", "CONFEITEIRO", "ACOUGUEIRO", "FEIRANTE", "VENDEDOR",
        "CONTADOR", "ECONOMISTA", "BANQUEIRO", "CORRETOR", "CONSULTOR", "ANALISTA", "PROGRAMADOR",
    ],
    "paises": [
        "BRASIL", "ARGENTINA", "URUGUAI", "PARAGUAI", "CHILE", "BOLIVIA", "PERU", "EQUADOR", "COLOMBIA", "VENEZUELA",
        "GUIANA", "SURINAME", "MEXICO", "CANADA", "CUBA", "HAITI", "JAMAICA", "PANAMA", "COSTARICA", "ESPANHA",
        "PORTUGAL", "FRANCA", "ITALIA", "ALEMANHA", "INGLATERRA", "IRLANDA", "ESCOCIA", "HOLANDA", "BELGICA", "SUICA",
        "AUSTRIA", "POLONIA", "GRECIA", "TURQUIA", "RUSSIA", "UCRANIA", "SUECIA", "NORUEGA", "DINAMARCA", "CHINA",
        "JAPAO", "COREIA", "INDIA", "INDONESIA", "TAILANDIA", "VIETNA", "FILIPINAS", "MALASIA", "SINGAPURA", "AUSTRALIA",
        "FIJI", "SAMOA", "TONGA", "PALAU", "NAURU", "EGITO", "ANGOLA", "MOCAMBIQUE", "NIGERIA", "GANA",
        "SENEGAL", "MARROCOS", "ARGELIA", "TUNISIA", "ISRAEL", "IRAQUE", "SIRIA", "LIBANO", "JORDANIA", "QATAR", "OMA",
    ],
    "tecnologia": [
        "COMPUTADOR", "NOTEBOOK", "TABLET", "CELULAR", "SMARTPHONE", "RELOGIO", "CAMERA", "DRONE", "ROBO", "CONSOLE",
        "INTERNET", "WIFI", "BLUETOOTH", "DADOS", "NUVEM", "SERVIDOR", "REDE", "FIBRA", "SATELITE", "ANTENA",
        "SOFTWARE", "HARDWARE", "SISTEMA", "PROGRAMA", "APLICATIVO", "JOGO", "SITE", "BLOG", "EMAIL", "CHAT",
        "MOUSE", "TECLADO", "MONITOR", "TELA", "IMPRESSORA", "SCANNER", "WEBCAM", "FONE", "MICROFONE", "CAIXA",
        "PROCESSADOR", "MEMORIA", "DISCO", "PENDRIVE", "CARTAO", "CABO", "BATERIA", "FONTE", "CODIGO", "ALGORITMO",
        "LOGICA", "BANCO", "SEGURANCA", "VIRUS", "ANTIVIRUS", "FIREWALL", "HACKER", "INOVACAO", "FUTURO", "VIRTUAL",
    ],
    "natureza": [
        "ARVORE", "FLOR", "FOLHA", "RAIZ", "TRONCO", "GALHO", "FRUTO", "SEMENTE", "GRAMA", "MATO",
        "FLORESTA", "MATA", "SELVA", "BOSQUE", "CERRADO", "CAATINGA", "PAMPA", "PANTANAL", "AMAZONIA", "RIO",
        "LAGO", "LAGOA", "MAR", "OCEANO", "CACHOEIRA", "CASCATA", "RIACHO", "CORREGO", "NASCENTE", "MONTANHA",
        "MORRO", "COLINA", "SERRA", "VALE", "PLANICIE", "PLANALTO", "CANYON", "ABISMO", "SOL", "LUA",
        "ESTRELA", "CEU", "NUVEM", "CHUVA", "RAIO", "TROVAO", "VENTO", "FOGO", "TERRA", "AGUA",
        "GELO", "NEVE", "GRANIZO", "ORVALHO", "NEBLINA", "VAPOR", "FUMACA", "PEDRA", "ROCHA", "AREIA",
        "BARRO", "LAMA", "POEIRA", "CASCALHO", "ARGILA", "MINERIO", "OURO",
    ],
    "cores": [
        "AZUL", "AMARELO", "VERMELHO", "VERDE", "LARANJA", "ROXO", "LILAS", "ROSA", "MARROM", "PRETO",
        "BRANCO", "CINZA", "PRATA", "DOURADO", "BEGE", "CREME", "VINHO", "TURQUESA", "CIANO", "MAGENTA",
        "VIOLETA", "INDIGO", "OCRE", "SALMAO", "CORAL", "RUBI", "ESMERALDA", "SAFIRA", "AMETISTA", "TOPAZIO",
        "JADE", "AMBAR", "BRONZE", "COBRE", "CHUMBO", "GRAFITE", "GELO", "MARFIM", "PEROLA", "NEON",
    ],
}


def _unique(words: List[str]) -> List[str]:
    """Sanitize and de-duplicate, keeping first occurrence order."""
    seen = set()
    result = []
    for word in words:
        clean = sanitize_word(word)
        if clean and clean not in seen:
            seen.add(clean)
            result.append(clean)
    return result


def theme_pool(theme: str) -> List[str]:
    """
    Return the full candidate pool for a theme.

    Unrecognized themes (including the random theme) get the union of
    every table.
    """
    key = theme.strip().lower()
    if key in WORD_LISTS:
        return _unique(WORD_LISTS[key])
    return _unique([word for words in WORD_LISTS.values() for word in words])


def get_offline_words(
    theme: str,
    count: Optional[int] = None,
    rng: Optional[random.Random] = None,
    max_length: Optional[int] = None,
) -> List[str]:
    '''
    Returns up to `count` words for `theme`, uniformly shuffled.
    Words longer than `max_length` are left out. With no `count` the
    whole shuffled pool is returned.
    '''
    rng = rng or random.Random()
    pool = theme_pool(theme)
    if max_length is not None:
        pool = [word for word in pool if 2 <= len(word) <= max_length]
    rng.shuffle(pool)
    return pool if count is None else pool[:count]
