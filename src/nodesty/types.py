"""Static response shapes returned by the Nodesty API.

These are ``TypedDict`` declarations used purely for type checking the
``data`` field of :class:`~nodesty.models.ApiResponse`. Payloads are passed
through exactly as decoded from JSON, so keys keep the API's camelCase
spelling and nothing here is validated at runtime.
"""

from __future__ import annotations

from typing import Literal, TypedDict

# --- Health ---


class HealthStatus(TypedDict):
    status: str
    timestamp: str


# --- VPS ---


class _Vnc(TypedDict):
    enabled: bool
    ip: str
    port: str
    password: str


class _Os(TypedDict):
    name: str
    distro: str


class _Usage(TypedDict):
    limit: int
    used: int
    free: int
    percent: float


class _Cpu(_Usage):
    manu: str
    cores: int


_NetSpeed = TypedDict("_NetSpeed", {"in": float, "out": float})
_BandwidthTotal = TypedDict("_BandwidthTotal", {"usage": int, "in": int, "out": int})
_Bandwidth = TypedDict(
    "_Bandwidth",
    {
        "total": _BandwidthTotal,
        "usage": list[int],
        "in": list[int],
        "out": list[int],
        "categories": list[str],
    },
)


class VpsInfo(TypedDict):
    """VPS status and resource usage. Sizes are bytes, CPU figures MHz."""

    vpsId: int
    proxmoxId: int
    hostname: str
    osReinstallLimit: int
    status: bool
    vnc: _Vnc
    os: _Os
    disk: _Usage
    ips: list[str]
    cpu: _Cpu
    ram: _Usage
    inode: _Usage
    netspeed: _NetSpeed
    bandwidth: _Bandwidth


class VpsBackup(TypedDict):
    date: str
    file: str
    createdAt: int


class VpsOsTemplate(TypedDict):
    id: int
    name: str


class VpsTask(TypedDict):
    action: str
    progress: str
    startedAt: int
    endedAt: int


class _IoSpeed(TypedDict):
    read: list[float]
    write: list[float]
    categories: list[int]


class _NetworkSpeed(TypedDict):
    download: list[float]
    upload: list[float]
    categories: list[int]


class VpsGraphs(TypedDict):
    avgDownload: float
    avgUpload: float
    avgIoRead: float
    avgIoWrite: float
    cpuUsage: dict[str, float]
    inodeUsage: dict[str, int]
    ramUsage: dict[str, int]
    diskUsage: dict[str, int]
    ioSpeed: _IoSpeed
    networkSpeed: _NetworkSpeed


# --- User / account ---


class UserInfo(TypedDict, total=False):
    id: str
    email: str
    username: str
    firstName: str
    lastName: str
    verified: bool
    createdAt: str
    updatedAt: str


class Service(TypedDict):
    id: str
    type: Literal["vps", "dedicated", "hosting"]
    name: str
    status: Literal["active", "suspended", "terminated"]
    plan: str
    location: str
    createdAt: str
    expiresAt: str
    autoRenew: bool


TicketStatus = Literal["open", "pending", "resolved", "closed"]
TicketPriority = Literal["low", "medium", "high"]


class TicketSummary(TypedDict):
    id: str
    subject: str
    status: TicketStatus
    priority: TicketPriority
    createdAt: str
    updatedAt: str


class TicketAttachment(TypedDict):
    name: str
    url: str
    size: int


class _TicketMessageBase(TypedDict):
    id: str
    sender: Literal["user", "support"]
    message: str
    timestamp: str


class TicketMessage(_TicketMessageBase, total=False):
    attachments: list[TicketAttachment]


class Ticket(TicketSummary):
    category: str
    description: str
    messages: list[TicketMessage]


InvoiceStatus = Literal["pending", "paid", "overdue", "cancelled"]


class InvoiceSummary(TypedDict):
    id: str
    number: str
    status: InvoiceStatus
    amount: float
    currency: str
    dueDate: str
    createdAt: str


class InvoiceItem(TypedDict):
    id: str
    description: str
    quantity: int
    unitPrice: float
    total: float


class _InvoiceBase(InvoiceSummary):
    subtotal: float
    tax: float
    items: list[InvoiceItem]


class Invoice(_InvoiceBase, total=False):
    paidAt: str


class UserSession(TypedDict):
    id: str
    ip: str
    userAgent: str
    createdAt: str
    lastActivity: str
    isActive: bool


# --- Dedicated servers ---


class DedicatedInfo(TypedDict):
    id: str
    name: str
    status: str
    ip: str
    os: str
    cpu: str
    memory: str
    disk: str
    uptime: str
    location: str


class DedicatedCpuInfo(TypedDict):
    model: str
    cores: int
    threads: int
    frequency: str
    cache: str


class _Memory(TypedDict):
    total: str
    type: str
    speed: str


class _Drive(TypedDict):
    model: str
    size: str
    type: str
    interface: str


class _Storage(TypedDict):
    drives: list[_Drive]


class _Interface(TypedDict):
    name: str
    speed: str
    type: str


class _Network(TypedDict):
    interfaces: list[_Interface]


class DedicatedHardware(TypedDict):
    cpu: DedicatedCpuInfo
    memory: _Memory
    storage: _Storage
    network: _Network


class DedicatedOsTemplate(TypedDict):
    id: str
    name: str
    version: str
    architecture: str
    category: str


class _ReinstallStatusBase(TypedDict):
    status: Literal["pending", "in_progress", "completed", "failed"]
    progress: int
    message: str
    startedAt: str


class DedicatedReinstallStatus(_ReinstallStatusBase, total=False):
    completedAt: str


class _DedicatedTaskBase(TypedDict):
    id: str
    type: str
    status: Literal["pending", "running", "completed", "failed"]
    progress: int
    message: str
    createdAt: str


class DedicatedTask(_DedicatedTaskBase, total=False):
    startedAt: str
    completedAt: str


# --- Firewall ---

Severity = Literal["low", "medium", "high", "critical"]


class _AttackDetails(TypedDict):
    sourceIp: str
    targetPort: int
    protocol: str
    packets: int
    bytes: int


class FirewallAttackLog(TypedDict):
    id: str
    ip: str
    attackType: str
    severity: Severity
    timestamp: str
    blocked: bool
    details: _AttackDetails


class _AttackNotificationBase(TypedDict):
    enabled: bool
    email: str
    severity: Severity


class FirewallAttackNotification(_AttackNotificationBase, total=False):
    webhook: str


class FirewallRdns(TypedDict):
    ip: str
    hostname: str
    status: Literal["active", "pending", "failed"]
    updatedAt: str


class _FirewallRuleBase(TypedDict):
    id: str
    port: int
    protocol: Literal["tcp", "udp", "both"]
    action: Literal["allow", "deny"]
    enabled: bool
    createdAt: str


class FirewallRule(_FirewallRuleBase, total=False):
    description: str


class _TopAttacker(TypedDict):
    ip: str
    attacks: int
    country: str


class _AttackCount(TypedDict):
    type: str
    count: int


class _TimeRange(TypedDict):
    start: str
    end: str


class FirewallStats(TypedDict):
    totalAttacks: int
    blockedAttacks: int
    allowedConnections: int
    topAttackers: list[_TopAttacker]
    attacksByType: list[_AttackCount]
    timeRange: _TimeRange
