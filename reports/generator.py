"""Генератор текстовых отчетов и изображения сетки"""
from typing import List, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont
import io
import os
import logging

from numerology import LINE_GUIDES, NumerologyCalculator, NumerologyResult, get_number_guide

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"

# Размеры фигур в пикселях
DIGIT_BASE = 76
CIRCLE_FIRST_DELTA = 28
CIRCLE_STEP = 22
TRIANGLE_FROM_CIRCLE_DELTA = 18
TRIANGLE_FROM_DIGIT_DELTA = 26
TRIANGLE_STEP = 24
TRIANGLE_RATIO = 0.86

# Символы фигур в текстовом отчете
CIRCLE_MARK = "●"
TRIANGLE_MARK = "▲"
SQUARE_MARK = "■"


def circle_diameter(index: int) -> int:
    """Диаметр круга с номером index (от цифры наружу)"""
    return DIGIT_BASE + CIRCLE_FIRST_DELTA + index * CIRCLE_STEP


def first_triangle_width(circle_count: int) -> int:
    """Первый треугольник охватывает последний круг или саму цифру"""
    if circle_count > 0:
        return circle_diameter(circle_count - 1) + TRIANGLE_FROM_CIRCLE_DELTA
    return DIGIT_BASE + TRIANGLE_FROM_DIGIT_DELTA


def triangle_size(index: int, circle_count: int) -> Tuple[float, float]:
    """Ширина и высота треугольника"""
    width = first_triangle_width(circle_count) + index * TRIANGLE_STEP
    return width, width * TRIANGLE_RATIO


def format_number(value: Optional[int]) -> str:
    """Число или прочерк"""
    return PLACEHOLDER if value is None else str(value)


class ReportGenerator:
    """Генератор текстовых и визуальных отчетов"""

    def __init__(self, calculator: Optional[NumerologyCalculator] = None):
        self.calculator = calculator or NumerologyCalculator()

    def _cell_marks(self, result: NumerologyResult, number: int) -> str:
        """Фигуры одной ячейки в виде символов"""
        marks = CIRCLE_MARK * result.circles[number] + TRIANGLE_MARK * result.triangles[number]
        if result.square_at == number:
            marks += SQUARE_MARK
        return marks

    def _format_grid(self, result: NumerologyResult) -> str:
        """Сетка 3x3 с фигурами"""
        rows = []
        for start in (1, 4, 7):
            cells = []
            for number in range(start, start + 3):
                cells.append(f"{number} {self._cell_marks(result, number)}".ljust(10))
            rows.append(" | ".join(cells).rstrip())
        return "\n".join(rows)

    def _format_lines(self, result: Optional[NumerologyResult]) -> str:
        """Состояние линий"""
        text = ""
        for line, active in self.calculator.line_states(result, LINE_GUIDES):
            state = "сформирована" if active else "не сформирована"
            text += f"• {line.code} {line.name}: {state}\n"
        return text

    def generate_text_report(self, raw: str) -> str:
        """Генерирует текстовый отчет по введенной дате"""
        canonical = self.calculator.parser.canonicalize(raw)
        result = self.calculator.derive(raw)

        if result is None:
            return f"""
📅 ДАТА РОЖДЕНИЯ: {canonical or PLACEHOLDER}

• Послеродовое число: {PLACEHOLDER}
• Мастер-число: {PLACEHOLDER}
• Главное число: {PLACEHOLDER}

Введите дату рождения в формате ГГГГ/ММ/ДД.
"""

        report = f"""
📅 ДАТА РОЖДЕНИЯ: {canonical}

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

🔢 ОСНОВНЫЕ ЧИСЛА:

• Послеродовое число: {result.postnatal}
• Мастер-число: {format_number(result.master)}
• Главное число: {result.life}

━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

🎯 СЕТКА ({CIRCLE_MARK} дата рождения, {TRIANGLE_MARK} послеродовое и мастер-число, {SQUARE_MARK} главное число):

{self._format_grid(result)}
"""

        guide = get_number_guide(result.life)
        if guide:
            born = ", ".join(map(str, self.calculator.born_digits(result))) or "нет"
            report += f"""
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

📖 ГЛАВНОЕ ЧИСЛО {result.life}: {guide.short} ({guide.type})
Цифры даты рождения: {born}
(+) {guide.plus}
(-) {guide.minus}
"""

        risk_items = self.calculator.risk_items(result)
        report += "\n━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━\n\n⚠️ НА ЧТО ОБРАТИТЬ ВНИМАНИЕ:\n\n"
        if risk_items:
            for item in risk_items:
                item_guide = get_number_guide(item.number)
                report += f"• {item.number} ({item.score}): {item_guide.minus}\n"
        else:
            report += "Нет чисел, требующих особого внимания.\n"

        report += "\n━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━\n\n📐 ЛИНИИ:\n\n"
        report += self._format_lines(result)

        return report

    def _load_font(self, size: int):
        """Ищет подходящий шрифт"""
        font_paths = [
            "/System/Library/Fonts/Helvetica.ttc",  # macOS
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux
            "C:/Windows/Fonts/arial.ttf",  # Windows
        ]

        for path in font_paths:
            if os.path.exists(path):
                try:
                    return ImageFont.truetype(path, size)
                except OSError:
                    logger.warning(f"Не удалось загрузить шрифт {path}")
        return ImageFont.load_default()

    def _triangle_points(self, cx: float, cy: float, width: float, height: float) -> List[Tuple[float, float]]:
        """Вершины треугольника с центром в (cx, cy)"""
        # Пропорции как у полигона 50,7 8,79 92,79 в рамке 100x86
        left = cx - width / 2
        top = cy - height / 2
        return [
            (left + width * 0.50, top + height * 7 / 86),
            (left + width * 0.08, top + height * 79 / 86),
            (left + width * 0.92, top + height * 79 / 86),
        ]

    def generate_visual_grid(self, result: Optional[NumerologyResult]) -> bytes:
        """Генерирует изображение сетки 3x3 с фигурами"""
        cell_size = 300
        img_size = cell_size * 3
        img = Image.new('RGB', (img_size, img_size), color='white')
        draw = ImageDraw.Draw(img)

        # Цвета
        border_color = (220, 220, 220)
        circle_color = (46, 139, 87)
        triangle_color = (30, 30, 30)
        square_color = (200, 40, 40)
        digit_color = (0, 0, 0)
        muted_color = (190, 190, 190)

        font = self._load_font(60)

        for index, number in enumerate(range(1, 10)):
            col, row = index % 3, index // 3
            cx = col * cell_size + cell_size / 2
            cy = row * cell_size + cell_size / 2

            draw.rectangle(
                [col * cell_size, row * cell_size, (col + 1) * cell_size, (row + 1) * cell_size],
                outline=border_color, width=2
            )

            circle_count = result.circles[number] if result else 0
            triangle_count = result.triangles[number] if result else 0
            has_square = result is not None and result.square_at == number

            for i in range(circle_count):
                radius = circle_diameter(i) / 2
                draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius],
                             outline=circle_color, width=3)

            for i in range(triangle_count):
                width, height = triangle_size(i, circle_count)
                draw.polygon(self._triangle_points(cx, cy, width, height),
                             outline=triangle_color, width=3)

            if has_square:
                half = DIGIT_BASE / 2
                draw.rectangle([cx - half, cy - half, cx + half, cy + half],
                               outline=square_color, width=4)

            muted = not circle_count and not triangle_count and not has_square
            text = str(number)
            bbox = draw.textbbox((0, 0), text, font=font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text(
                (cx - text_width / 2, cy - text_height / 2 - bbox[1]),
                text,
                fill=muted_color if muted else digit_color,
                font=font
            )

        # Сохраняем в bytes
        img_bytes = io.BytesIO()
        img.save(img_bytes, format='PNG')
        img_bytes.seek(0)

        return img_bytes.getvalue()
