"""
Constantes pour le rapport de rapprochement mensuel et son export.
"""

MIN_REPORT_YEAR = 2020

# Libellés de statut utilisés dans le rapport (différents de l'écran de stock pour NORMAL)
REPORT_STATUS_LABELS = {
    "NORMAL": "Bình thường",
    "LOW": "Sắp hết",
    "OUT_OF_STOCK": "Hết hàng",
}

CSV_BOM = "\ufeff"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
MISSING_ATTRIBUTE = "-"

SECTION_SUMMARY = "=== TỔNG QUAN ==="
SECTION_MOVEMENTS = "=== BIẾN ĐỘNG TRONG THÁNG ==="
SECTION_DETAILS = "=== CHI TIẾT TỒN KHO ==="
SECTION_TOTALS = "=== TỔNG CỘNG ==="

DETAIL_HEADERS = (
    "STT",
    "SKU",
    "Tên sản phẩm",
    "Màu sắc",
    "Kích thước",
    "Xuất xứ",
    "Đơn giá",
    "Tồn đầu kỳ",
    "Nhập trong kỳ",
    "Xuất trong kỳ",
    "Điều chỉnh",
    "Hoàn trả",
    "Tồn cuối kỳ",
    "Giá trị tồn kho",
    "Trạng thái",
)
