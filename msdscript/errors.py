class MSDScriptError(RuntimeError):
    pass