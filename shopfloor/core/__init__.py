"""业务服务"""

from .approval import ProposalApprovalService
from .dashboard import dashboard_stats
from .inspection import criterion_matches, matching_criteria, should_inspect
from .lifecycle import ProductionLifecycleService, compute_progress
from .notifications import NotificationService
from .purchasing import PurchasingService
from .quality import QualityService
from .sales import SalesService
from .single_flight import SingleFlight
from .suppliers import SupplierService

__all__ = [
    "ProposalApprovalService",
    "dashboard_stats",
    "criterion_matches",
    "matching_criteria",
    "should_inspect",
    "ProductionLifecycleService",
    "compute_progress",
    "NotificationService",
    "PurchasingService",
    "QualityService",
    "SalesService",
    "SingleFlight",
    "SupplierService",
]
