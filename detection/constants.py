import os

# Title word in cell A1 that marks a matrix ("date × group") sheet.
MATRIX_TITLE_MARKER: str = os.getenv("MATRIX_TITLE_MARKER", "расписание").lower()

# Default name of the first sheet in a fresh workbook; always parsed as a matrix.
DEFAULT_FIRST_SHEET: str = os.getenv("DEFAULT_FIRST_SHEET", "Лист1")
