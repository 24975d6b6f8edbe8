"""逻辑表名与工作表名的映射"""

CUSTOMERS = "customers"
PRODUCTS = "products"
SALES_ORDERS = "sales_orders"
SALES_ORDER_ITEMS = "sales_order_items"
PROPOSALS = "proposals"
PRODUCTION_ORDERS = "production_orders"
PRODUCTION_PROCESSES = "production_processes"
PURCHASES = "purchases"
INVENTORY = "inventory"
INVENTORY_MOVEMENTS = "inventory_movements"
QUALITY_INSPECTIONS = "quality_inspections"
INSPECTION_CRITERIA = "inspection_criteria"
NOTIFICATIONS = "notifications"
SUPPLIERS = "suppliers"

SHEET_NAMES = {
    CUSTOMERS: "clientes",
    PRODUCTS: "produtos",
    SALES_ORDERS: "pedidos_venda",
    SALES_ORDER_ITEMS: "itens_pedido",
    PROPOSALS: "propostas",
    PRODUCTION_ORDERS: "ordens_producao",
    PRODUCTION_PROCESSES: "processos_producao",
    PURCHASES: "compras",
    INVENTORY: "estoque",
    INVENTORY_MOVEMENTS: "movimentacoes_estoque",
    QUALITY_INSPECTIONS: "inspecoes_qualidade",
    INSPECTION_CRITERIA: "criterios_inspecao",
    SUPPLIERS: "fornecedores",
    NOTIFICATIONS: "notificacoes",
}


def sheet_name(table: str) -> str:
    """逻辑表名 -> 工作表名；未知表名原样使用"""
    return SHEET_NAMES.get(table, table)
