class SkimError(Exception):
    """ Base class for all Skim errors"""
    pass

class SkimSyntaxError(SkimError):
    """ Raised when the reader cannot make a datum out of its input"""
    pass

class SkimAnalysisError(SkimError):
    """ Raised when a form is malformed (wrong shape or arity of a special form)"""
    pass

class SkimInvalidSymbol(SkimAnalysisError):
    """ Raised when an identifier cannot be used as a variable name"""
    pass

class SkimUnboundSymbol(SkimError):
    """ Raised when a symbol is used before it is bound"""
    pass

class SkimArityError(SkimError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SkimTypeError(SkimError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class SkimDivisionByZero(SkimError):
    """ Raised on division or modulo by zero"""

class SkimOverflowError(SkimError):
    """ Raised when an exact result does not fit the configured integer width"""
