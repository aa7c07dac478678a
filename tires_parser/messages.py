from __future__ import annotations


DEFAULT_LANG = "uk"

MESSAGES = {
    "uk": {
        "studded_start": "[1/3] Збір шипованих шин: {url}",
        "studded_done": "[1/3] Шипованих шин у довіднику: {count} (сторінок: {pages})",
        "stage_categories": "[2/3] Парсинг категорій: {total}",
        "category_start": "   📦 {name} - обробка...",
        "category_page": "   {name}: сторінка {page} - товарів {found}, пропущено {skipped}",
        "fetch_failed": "   ❌ {name}: помилка запиту: {error}",
        "parse_failed": "   ❌ {name}: помилка обробки: {error}",
        "export_failed": "   ❌ {name}: не вдалося зберегти Excel: {error}",
        "no_data": "   ⚠️  Немає даних для {name}",
        "saved": "   ✅ {name}.xlsx - збережено {count} товарів",
        "stage_done": "[3/3] ✅ ПАРСИНГ ЗАВЕРШЕНО! Файли: {out_dir}",
        "menu": (
            "╔════════════════════════════════════════╗\n"
            "║     ПАРСЕР ШИН - ГОЛОВНЕ МЕНЮ          ║\n"
            "╚════════════════════════════════════════╝\n"
            "\n"
            "  1 ➜ Додати категорію\n"
            "  2 ➜ Показати всі категорії\n"
            "  3 ➜ Видалити категорію\n"
            "  4 ➜ ЗАПУСТИТИ ПАРСИНГ\n"
            "  5 ➜ Вихід\n"
        ),
        "prompt_choice": "Ваш вибір: ",
        "prompt_url": "📎 Введіть URL категорії: ",
        "prompt_name": "📝 Введіть назву категорії: ",
        "prompt_remove": "🗑️  Введіть номер для видалення (0 - відміна): ",
        "prompt_markup": "💰 Відсоток додавання до ціни (Enter = {default:.0f}%): ",
        "invalid_choice": "❌ Невірний вибір. Спробуйте ще раз.",
        "empty_url": "❌ URL не може бути пустим",
        "empty_name": "❌ Назва не може бути пустою",
        "added": "✅ Категорію '{name}' успішно додано!",
        "removed": "✅ Категорію '{name}' видалено!",
        "invalid_number": "❌ Невірний номер",
        "cancelled": "↩️  Відмінено",
        "no_categories": "📭 Категорій поки немає",
        "need_categories": "❌ Спочатку додайте категорії",
        "category_item": "{index}. 📦 {name}\n   🔗 {url}",
        "run_summary": "📋 Буде оброблено категорій: {total}, націнка {markup}%",
        "error": "Помилка: {error}",
        "interrupted": "Перервано користувачем",
        "bye": "👋 До побачення!",
        "help_desc": "Парсер шин: збір товарів з категорій каталогу та експорт в Excel.",
        "help_categories": "Файл зі списком категорій (за замовчуванням categories.json)",
        "help_lang": "Мова повідомлень: uk або en (за замовчуванням uk)",
        "help_add": "Додати категорію",
        "help_list": "Показати всі категорії",
        "help_remove": "Видалити категорію за номером",
        "help_run": "Запустити парсинг усіх категорій",
        "help_menu": "Інтерактивне меню",
        "help_url": "URL категорії",
        "help_name": "Назва категорії (назва файлу та аркуша Excel)",
        "help_number": "Номер категорії зі списку",
        "help_markup": "Відсоток додавання до ціни (за замовчуванням 9)",
        "help_out": "Папка для Excel-файлів (за замовчуванням поточна)",
        "help_bad_words": "Файл зі словами, що видаляються з назви",
        "help_del_words": "Файл з фрагментами, через які товар пропускається",
        "help_base_url": "Базовий URL сайту для посилань пагінації",
        "help_studded_url": "URL розділу шипованих шин",
        "help_no_studded": "Не позначати шиповані шини",
        "help_timeout": "Тайм-аут запиту (сек), за замовчуванням без обмеження",
        "help_ua": "Перевизначити User-Agent",
        "help_workers": "Кількість одночасних категорій (за замовчуванням усі)",
    },
    "en": {
        "studded_start": "[1/3] Collecting studded tires: {url}",
        "studded_done": "[1/3] Studded tires indexed: {count} (pages: {pages})",
        "stage_categories": "[2/3] Parsing categories: {total}",
        "category_start": "   {name} - processing...",
        "category_page": "   {name}: page {page} - products {found}, skipped {skipped}",
        "fetch_failed": "   [error] {name}: request failed: {error}",
        "parse_failed": "   [error] {name}: processing failed: {error}",
        "export_failed": "   [error] {name}: could not save Excel: {error}",
        "no_data": "   [warn] No data for {name}",
        "saved": "   {name}.xlsx - saved {count} products",
        "stage_done": "[3/3] Parsing has been completed. Files: {out_dir}",
        "menu": (
            "==========================================\n"
            "        TIRES PARSER - MAIN MENU\n"
            "==========================================\n"
            "\n"
            "  1 - Add category\n"
            "  2 - List categories\n"
            "  3 - Remove category\n"
            "  4 - START PARSING\n"
            "  5 - Exit\n"
        ),
        "prompt_choice": "Your choice: ",
        "prompt_url": "Category URL: ",
        "prompt_name": "Category name: ",
        "prompt_remove": "Number to remove (0 - cancel): ",
        "prompt_markup": "Price markup percent (Enter = {default:.0f}%): ",
        "invalid_choice": "Invalid choice. Try again.",
        "empty_url": "URL must not be empty",
        "empty_name": "Name must not be empty",
        "added": "Category '{name}' added",
        "removed": "Category '{name}' removed",
        "invalid_number": "Invalid number",
        "cancelled": "Cancelled",
        "no_categories": "No categories yet",
        "need_categories": "Add categories first",
        "category_item": "{index}. {name}\n   {url}",
        "run_summary": "Categories to process: {total}, markup {markup}%",
        "error": "Error: {error}",
        "interrupted": "Interrupted by user",
        "bye": "Bye!",
        "help_desc": "Tires parser: collect catalog category listings and export them to Excel.",
        "help_categories": "Categories file (default categories.json)",
        "help_lang": "Messages language: uk or en (default uk)",
        "help_add": "Add a category",
        "help_list": "List categories",
        "help_remove": "Remove a category by number",
        "help_run": "Parse all categories",
        "help_menu": "Interactive menu",
        "help_url": "Category URL",
        "help_name": "Category name (Excel file and sheet title)",
        "help_number": "Category number from the list",
        "help_markup": "Price markup percent (default 9)",
        "help_out": "Directory for Excel files (default current)",
        "help_bad_words": "File with words removed from product names",
        "help_del_words": "File with fragments that drop a product",
        "help_base_url": "Site base URL for pagination links",
        "help_studded_url": "Studded tires section URL",
        "help_no_studded": "Do not mark studded tires",
        "help_timeout": "Request timeout (sec), unlimited by default",
        "help_ua": "Override User-Agent",
        "help_workers": "Number of categories parsed at once (default all)",
    },
}


def msg(lang: str, key: str, **kwargs) -> str:
    lang_key = lang if lang in MESSAGES else DEFAULT_LANG
    template = MESSAGES[lang_key].get(key, "")
    return template.format(**kwargs)
