# Subpackage aggregating Streamlit page renderers

from .general import display_home_page
from .converter import display_mybatis_converter_page

__all__ = [
    "display_home_page",
    "display_mybatis_converter_page",
]
