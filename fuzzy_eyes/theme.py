"""Platform detection, fonts and colours shared by the tkinter windows."""
import platform

IS_MAC = platform.system() == "Darwin"
IS_WIN = platform.system() == "Windows"
FONT = "Helvetica Neue" if IS_MAC else "Segoe UI" if IS_WIN else "DejaVu Sans"

# ─── Colours ──────────────────────────────────────────────────
C_BG       = "#111827";  C_CARD     = "#1e293b"
C_ACCENT   = "#22d3ee";  C_BTN_PRI  = "#1d4ed8";  C_BTN_SEC  = "#334155"
C_TEXT     = "#f1f5f9";  C_TEXT_DIM = "#94a3b8";  C_TEXT_MUT = "#64748b"
C_OK       = "#22c55e";  C_ERR      = "#ef4444"

# Full-screen countdown
C_CD_BG    = "#000000";  C_CD_FG    = "#ffffff"
