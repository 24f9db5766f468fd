"""
Design tokens for the todo pages (light slate).

Pages use the C_* names; no long inline class strings in page modules.
"""

C_FONT_STACK = '"Inter", system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'

# CSS braces are doubled for the f-string.
APP_HEAD_HTML = f"""
<style>
  :root, body, .q-body {{
    font-family: {C_FONT_STACK};
    letter-spacing: -0.01em;
    color-scheme: light;
  }}
  body, .q-body, .nicegui-content {{
    background: #f8fafc !important;
    color: #0f172a !important;
  }}
  [class*="q-elevation--"], .q-card {{ box-shadow: none !important; }}
</style>
"""

STYLE_BG = "bg-slate-50 text-slate-900 min-h-screen"
STYLE_CONTAINER = "w-full max-w-2xl mx-auto px-4 py-8 gap-6"
STYLE_HEADER = "w-full bg-white border-b border-slate-200 px-4 py-3 items-center justify-between"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_HEADING = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_PAGE_TITLE = STYLE_HEADING
STYLE_BRAND = "text-xl font-bold text-slate-900 no-underline"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"
STYLE_LINK = "text-sm text-slate-500 hover:text-slate-900 no-underline"

STYLE_BTN_PRIMARY = (
    "bg-slate-900 text-white hover:bg-slate-800 active:scale-[0.99] rounded-lg px-4 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-amber-400/40"
)
STYLE_BTN_SECONDARY = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 active:scale-[0.99] rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_SUCCESS = (
    "bg-emerald-600 text-white hover:bg-emerald-700 active:scale-[0.99] rounded-lg px-3 py-1 text-sm "
    "font-semibold transition-all"
)
STYLE_BTN_WARNING = (
    "bg-amber-500 text-white hover:bg-amber-600 active:scale-[0.99] rounded-lg px-3 py-1 text-sm "
    "font-semibold transition-all"
)
STYLE_BTN_DANGER = (
    "bg-rose-600 text-white hover:bg-rose-700 active:scale-[0.99] rounded-lg px-3 py-1 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-rose-500/30"
)

STYLE_INPUT = "w-full text-sm"

STYLE_TODO_ROW = "w-full items-center justify-between border-b border-slate-100 py-2"
STYLE_TODO_TITLE = "flex-1 text-sm text-slate-900"
STYLE_TODO_TITLE_DONE = "flex-1 text-sm text-slate-500 line-through"
STYLE_ERROR_TEXT = "text-sm text-rose-600"

C_BG = STYLE_BG
C_CONTAINER = STYLE_CONTAINER
C_HEADER = STYLE_HEADER
C_CARD = STYLE_CARD
C_PAGE_TITLE = STYLE_PAGE_TITLE
C_BRAND = STYLE_BRAND
C_TEXT_SUBTLE = STYLE_TEXT_SUBTLE
C_LINK = STYLE_LINK
C_BTN_PRIM = STYLE_BTN_PRIMARY
C_BTN_SEC = STYLE_BTN_SECONDARY
C_BTN_SUCCESS = STYLE_BTN_SUCCESS
C_BTN_WARNING = STYLE_BTN_WARNING
C_BTN_DANGER = STYLE_BTN_DANGER
C_INPUT = STYLE_INPUT
C_TODO_ROW = STYLE_TODO_ROW
C_TODO_TITLE = STYLE_TODO_TITLE
C_TODO_TITLE_DONE = STYLE_TODO_TITLE_DONE
C_ERROR_TEXT = STYLE_ERROR_TEXT
