"""Registry of special forms for the Skim evaluator.

RESERVED_WORDS maps each reserved word to the analyzer that turns its syntax
into an expression node; FORM_HANDLERS maps each of those node types to the
handler that evaluates it. The analyzer consults the first table only when the
head symbol is not bound as a variable, so reserved words can be shadowed.
"""

from types import MappingProxyType

from skim.evaluation.special_forms.begin_form import analyze_begin, begin_form
from skim.evaluation.special_forms.cond_form import analyze_cond, cond_form
from skim.evaluation.special_forms.define_form import analyze_define, define_form
from skim.evaluation.special_forms.if_form import analyze_if, if_form
from skim.evaluation.special_forms.lambda_form import analyze_lambda, lambda_form
from skim.evaluation.special_forms.let_forms import analyze_let, analyze_letrec, let_form, letrec_form
from skim.evaluation.special_forms.logic_forms import analyze_and, analyze_or, and_form, or_form
from skim.evaluation.special_forms.quote_forms import analyze_quote, quote_form
from skim.evaluation.special_forms.set_form import analyze_set, set_form
from skim.expressions import And, Begin, Cond, Define, If, Lambda, Let, Letrec, Or, Quote, Set

RESERVED_WORDS = MappingProxyType({
    "quote": analyze_quote,
    "if": analyze_if,
    "cond": analyze_cond,
    "begin": analyze_begin,
    "and": analyze_and,
    "or": analyze_or,
    "lambda": analyze_lambda,
    "define": analyze_define,
    "let": analyze_let,
    "letrec": analyze_letrec,
    "set!": analyze_set,
})

FORM_HANDLERS = MappingProxyType({
    Quote: quote_form,
    If: if_form,
    Cond: cond_form,
    Begin: begin_form,
    And: and_form,
    Or: or_form,
    Lambda: lambda_form,
    Define: define_form,
    Let: let_form,
    Letrec: letrec_form,
    Set: set_form,
})
