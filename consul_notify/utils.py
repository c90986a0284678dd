# Caracteres de controle do mrkdwn do Slack (links, menções, entidades)
_MRKDWN_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def escape_mrkdwn(value) -> str:
    if value is None:
        return ""
    text = str(value)
    # '&' primeiro para não escapar duas vezes as entidades geradas
    for raw, entity in _MRKDWN_ESCAPES:
        text = text.replace(raw, entity)
    return text

