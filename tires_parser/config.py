BASE_URL = "https://rengasketola.fi/"
STUDDED_URL = "https://rengasketola.fi/shop/category/nastarenkaat"

CATEGORIES_FILE = "categories.json"
BAD_WORDS_FILE = "bad_words.txt"
DEL_WORDS_FILE = "del_item_words.txt"

DEFAULT_MARKUP_PERCENT = 9.0
PRICE_SURCHARGE = 20
DEFAULT_QUANTITY = 8
STUDDED_SUFFIX = " -STUD"

# Odoo theme markers on the listing pages
CONTENT_SELECTOR = ".mt-0"
ITEM_SELECTOR = ".tp-product-item-grid-1"
TITLE_SELECTOR = ".tp-product-title"
PRICE_SELECTOR = "span .oe_currency_value"
NEXT_PAGE_SELECTOR = "a.tp-load-more-on-scroll"
