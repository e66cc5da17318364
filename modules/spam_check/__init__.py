from modules.spam_check.analyzer import analyze_html
from modules.spam_check.engine import SpamCheckEngine
from modules.spam_check.html_parser import HtmlParser, RegexHtmlParser, SoupHtmlParser, select_parser
from modules.spam_check.scorer import check_stop_words
from modules.spam_check.stop_words import StopWordsLoader, parse_stop_words
