TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Bézier Curve Editor",
        "instructions": "Mouse wheel: Zoom. Space + Drag: Pan. Ctrl+Click: Smooth point. Del/Backspace: Delete node.",
        "undo": "Undo",
        "redo": "Redo",
        "closePath": "Close Path",
        "openPath": "Open Path",
        "snapToGrid": "Snap to Grid",
        "deleteNode": "Delete Node",
        "clearCanvas": "Clear Canvas",
        "exportSVG": "Export to SVG",
        "language": "Español",
        "applySymmetry": "Apply Symmetry",
        "cancelSymmetry": "Cancel",
        "pickEdgePrompt": "Click a straight edge to apply symmetry.",
        "notStraightEdgeError": "Symmetry can only be applied to a straight edge.",
    },
    "es": {
        "title": "Editor de Curvas Bézier",
        "instructions": "Rueda del ratón: Zoom. Espacio + Arrastrar: Mover. Ctrl+Click: Punto suave. Supr/Retroceso: Borrar nodo.",
        "undo": "Deshacer",
        "redo": "Rehacer",
        "closePath": "Cerrar Trazado",
        "openPath": "Abrir Trazado",
        "snapToGrid": "Ajustar a la Rejilla",
        "deleteNode": "Borrar Nodo",
        "clearCanvas": "Borrar Lienzo",
        "exportSVG": "Exportar a SVG",
        "language": "English",
        "applySymmetry": "Aplicar Simetría",
        "cancelSymmetry": "Cancelar",
        "pickEdgePrompt": "Haz clic en una arista recta para aplicar la simetría.",
        "notStraightEdgeError": "La simetría solo se puede aplicar a una arista recta.",
    },
}


def tr(language: str, key: str) -> str:
    return TRANSLATIONS.get(language, {}).get(key, key)
