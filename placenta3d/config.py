"""
Конфігурація за замовчуванням
=============================
Імена вхідних файлів, формат рядка та точність звіту в одному місці.

Exports:
    DEFAULT_ROI_PATH (str): хмара плаценти (region of interest).
    DEFAULT_CONTAINER_PATH (str): хмара матки (containing region).
    DEFAULT_DELIMITER (str): роздільник полів у рядку.
    DEFAULT_COLUMNS (str): яка вісь у якій колонці файлу.
    REPORT_DECIMALS (int): знаків після коми у звіті.
"""

DEFAULT_ROI_PATH: str = "placenta.txt"
DEFAULT_CONTAINER_PATH: str = "uterus.txt"

DEFAULT_DELIMITER: str = ", "

# колонка 0 -> x (ліво-право), 1 -> z (верх-низ), 2 -> y (перед-зад)
DEFAULT_COLUMNS: str = "xzy"

REPORT_DECIMALS: int = 3
