from .functions import MathFunctionNode

# Named function templates offered when adding a MathFunction node.
FUNCTION_PRESETS = {
    'Sine': "sin({amp,0,2,1,0.1,same}*input2)",
    'Cosine': "cos({amp,0,2,1,0.1,same}*input2)",
    'Wave': "sin({freq,0,20,4,0.5,same}*input2)*{height,0,1,0.5,0.01,f32}",
    'Ripple': "cos(length(input2)*{freq,1,30,10,1,f32})*{amp,0,1,0.2,0.01,same}",
    'Scale': "input2*{factor,0,4,1,0.05,same}",
}


def math_function(preset: str, node_id: str = None) -> MathFunctionNode:
    """
    Creates a MathFunction node from a named preset.

    Raises:
        KeyError: If the preset does not exist.
    """
    try:
        func = FUNCTION_PRESETS[preset]
    except KeyError:
        raise KeyError(f"Unknown function preset '{preset}'. Available: {', '.join(FUNCTION_PRESETS)}") from None
    return MathFunctionNode(preset, func, node_id=node_id)
