from .word_bank import WORD_LISTS, RANDOM_THEME, get_offline_words, theme_pool

__all__ = ["WORD_LISTS", "RANDOM_THEME", "get_offline_words", "theme_pool"]
