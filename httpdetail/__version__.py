__title__ = "httpdetail"
__description__ = "Detailed results and canned responses for httpx requests."
__version__ = "0.4.0"
