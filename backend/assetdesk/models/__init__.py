from assetdesk.models.asset import Asset
from assetdesk.models.audit import AuditLog
from assetdesk.models.category import AssetCategory
from assetdesk.models.employee import Employee
from assetdesk.models.maintenance import MaintenanceRecord
from assetdesk.models.procurement import PurchaseOrder
from assetdesk.models.room import Room, RoomCategory
from assetdesk.models.task import TaskItem
from assetdesk.models.tenant import Tenant

__all__ = [
    "Asset",
    "AssetCategory",
    "AuditLog",
    "Employee",
    "MaintenanceRecord",
    "PurchaseOrder",
    "Room",
    "RoomCategory",
    "TaskItem",
    "Tenant",
]
