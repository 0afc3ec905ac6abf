# bookcenter_search/shared/utils/__init__.py

"""Shared utility functions"""

# Local imports
from bookcenter_search.shared.utils.text_utils import contains_bangla_script
from bookcenter_search.shared.utils.text_utils import is_bangla_character
from bookcenter_search.shared.utils.text_utils import is_word_char
from bookcenter_search.shared.utils.text_utils import split_word_runs

__all__ = ["contains_bangla_script", "is_bangla_character", "is_word_char", "split_word_runs"]
