"""shopfloor 制造运营后台

销售订单、报价审批、生产工序跟踪、质检、采购与库存，持久化在电子表格行存储上。
"""

__version__ = "1.0.0"
