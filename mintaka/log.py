import logging

logger = logging.getLogger('mintaka')
