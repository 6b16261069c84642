"""Telegram бот: расчет чисел по дате рождения"""
import asyncio
import logging
from telegram import Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters, ContextTypes
from telegram.constants import ParseMode, ChatAction

from config import settings
from numerology import LINE_GUIDES, NUMBER_GUIDES, NumerologyCalculator
from reports import ReportGenerator

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level
)
logger = logging.getLogger(__name__)

# Инициализация
calculator = NumerologyCalculator()
report_generator = ReportGenerator(calculator)


def create_section_header(title: str, emoji: str = "✨") -> str:
    """Создает заголовок секции"""
    return f"\n{emoji} <b>{title}</b>\n{'─' * 30}\n"


def format_guide_text() -> str:
    """Справочник чисел и линий"""
    text = create_section_header("Значения чисел", "📖")
    for number, guide in NUMBER_GUIDES.items():
        text += f"<b>{number} {guide.short}</b> — {guide.type}\n"
        text += f"(+) {guide.plus}\n(-) {guide.minus}\n\n"
    text += create_section_header("Линии", "📐")
    for line in LINE_GUIDES:
        text += f"<code>{line.code}</code> {line.name}\n"
    return text


DATE_HINT = (
    "💡 <i>Формат: ГГГГ/ММ/ДД</i>\n"
    "💡 <i>Пример: 1981/12/07, 1981-12-07 или 19811207</i>"
)


async def send_typing_action(update: Update):
    """Отправляет индикатор печати"""
    await update.message.chat.send_action(ChatAction.TYPING)
    await asyncio.sleep(0.5)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик команды /start"""
    user = update.effective_user

    welcome_text = (
        f"👋 <b>Добро пожаловать, {user.first_name}!</b>\n\n"
        "Отправьте дату рождения, и я рассчитаю послеродовое число, "
        "мастер-число и главное число, а также фигуры на сетке 3x3.\n\n"
        f"{DATE_HINT}"
    )

    await update.message.reply_text(welcome_text, parse_mode=ParseMode.HTML)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик команды /help"""
    help_text = (
        f"{create_section_header('Доступные команды', '⌨️')}"
        "<code>/start</code> — Приветствие\n"
        "<code>/guide</code> — Значения чисел и линий\n"
        "<code>/help</code> — Эта справка\n\n"
        "Любое другое сообщение считается датой рождения.\n\n"
        f"{DATE_HINT}"
    )
    await update.message.reply_text(help_text, parse_mode=ParseMode.HTML)


async def guide_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик команды /guide"""
    await update.message.reply_text(format_guide_text(), parse_mode=ParseMode.HTML)


async def receive_date(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение даты рождения и отправка результата"""
    date_str = update.message.text.strip()
    result = calculator.derive(date_str)

    if result is None:
        await update.message.reply_text(
            "❌ <b>Неверный формат даты</b>\n\n" + DATE_HINT,
            parse_mode=ParseMode.HTML
        )
        return

    await send_typing_action(update)

    report = report_generator.generate_text_report(date_str)
    visual = report_generator.generate_visual_grid(result)

    await update.message.reply_photo(photo=visual)
    await update.message.reply_text(report)
    logger.info(f"Расчет для {update.effective_user.id}: {calculator.parser.canonicalize(date_str)}")


def main():
    """Главная функция запуска бота"""
    if not settings.telegram_bot_token:
        raise RuntimeError("Не задан TELEGRAM_BOT_TOKEN")

    # Создание приложения
    application = Application.builder().token(settings.telegram_bot_token).build()

    # Регистрация обработчиков
    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("guide", guide_command))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, receive_date))

    # Запуск бота
    logger.info("Бот запущен...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == '__main__':
    main()
