"""
Оркестратор бронирования номеров отеля (Happy Hotel).

Пакет разделен на слои:
- domain: объекты-значения, правило расчета цены и исключения
- application: порты внешних сервисов и сервис бронирования
- infrastructure: простые адаптеры портов (память, JSON-файл, консоль)
"""
