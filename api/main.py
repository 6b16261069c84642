"""FastAPI приложение"""
import io
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse, StreamingResponse

from config import settings
from numerology import LINE_GUIDES, NUMBER_GUIDES, DateParser, NumerologyCalculator
from reports import ReportGenerator
from reports.generator import PLACEHOLDER, format_number

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Нумерология по дате рождения API",
    description="API для расчета чисел и фигур на сетке 3x3",
    version="1.0.0"
)

# Инициализация
parser = DateParser()
calculator = NumerologyCalculator(parser)
report_generator = ReportGenerator(calculator)


def build_payload(raw: str) -> dict:
    """Собирает ответ для введенной даты"""
    canonical = parser.canonicalize(raw)
    result = calculator.derive(raw)

    lines = [
        {"code": line.code, "name": line.name, "active": active}
        for line, active in calculator.line_states(result, LINE_GUIDES)
    ]

    if result is None:
        return {
            "success": False,
            "date": canonical,
            "query": parser.to_query(raw),
            "summary": {"postnatal": PLACEHOLDER, "master": PLACEHOLDER, "life": PLACEHOLDER},
            "data": None,
            "born_digits": [],
            "risk_items": [],
            "lines": lines,
        }

    return {
        "success": True,
        "date": canonical,
        "query": parser.to_query(raw),
        "summary": {
            "postnatal": str(result.postnatal),
            "master": format_number(result.master),
            "life": str(result.life),
        },
        "data": result.model_dump(mode="json"),
        "born_digits": calculator.born_digits(result),
        "risk_items": [item.model_dump() for item in calculator.risk_items(result)],
        "lines": lines,
    }


# API endpoints
@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "Нумерология по дате рождения API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/api/numerology")
async def calculate(d: str = ""):
    """Расчет по дате из параметра d"""
    try:
        return build_payload(d)
    except Exception as e:
        logger.exception("Ошибка расчета")
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/numerology/select")
async def calculate_selection(
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None
):
    """Расчет по году, месяцу и дню из списков"""
    try:
        value = parser.assemble_selection(year, month, day)
        payload = build_payload(value)
        payload["max_day"] = parser.days_in_month(year, month)
        return payload
    except Exception as e:
        logger.exception("Ошибка расчета")
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/numerology/report", response_class=PlainTextResponse)
async def calculate_report(d: str = ""):
    """Текстовый отчет"""
    return report_generator.generate_text_report(d)


@app.get("/api/numerology/visual")
async def calculate_visual(d: str = ""):
    """Изображение сетки"""
    try:
        visual = report_generator.generate_visual_grid(calculator.derive(d))

        return StreamingResponse(
            io.BytesIO(visual),
            media_type="image/png",
            headers={"Content-Disposition": "attachment; filename=grid.png"}
        )
    except Exception as e:
        logger.exception("Ошибка генерации изображения")
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/guides")
async def get_guides():
    """Справочник чисел и линий"""
    return {
        "success": True,
        "numbers": {number: guide.model_dump() for number, guide in NUMBER_GUIDES.items()},
        "lines": [line.model_dump() for line in LINE_GUIDES],
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
