import json


def export_json(theme, filepath):
    """Export the resolved palette as JSON.

    Args:
        theme: CompiledTheme
        filepath: Output file path
    """
    data = {name: color.hex for name, color in theme.colors.items()}

    data["_name"] = theme.name
    data["_background"] = str(theme.background)
    data["_hsl"] = {
        name: [
            round(color.hue, 2),
            round(color.saturation, 4),
            round(color.lightness, 4),
        ]
        for name, color in theme.colors.items()
    }

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
