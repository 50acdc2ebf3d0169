from medi.lexer import Token, TokenKind, token_kinds, tokenize


def test_keywords_and_identifiers():
    assert token_kinds("patient let observation foo123") == [
        TokenKind.PATIENT,
        TokenKind.LET,
        TokenKind.OBSERVATION,
        TokenKind.IDENTIFIER,
    ]


def test_literals_and_operators():
    assert token_kinds('42 "hello" + - * / == != <= >= && ||') == [
        TokenKind.INT_LITERAL,
        TokenKind.STRING_LITERAL,
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.EQ_EQ,
        TokenKind.NEQ,
        TokenKind.LE,
        TokenKind.GE,
        TokenKind.AND_AND,
        TokenKind.OR_OR,
    ]


def test_int_literal_value():
    tokens = list(tokenize('42 "hello"'))
    assert tokens[0] == Token(TokenKind.INT_LITERAL, "42", 0, 42)
    assert tokens[1].text == '"hello"'


def test_medical_terms_and_workflow():
    assert token_kinds("fhir_query kaplan_meier regulate report") == [
        TokenKind.FHIR_QUERY,
        TokenKind.KAPLAN_MEIER,
        TokenKind.REGULATE,
        TokenKind.REPORT,
    ]


def test_keyword_prefix_is_identifier():
    assert token_kinds("patients letter") == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER]


def test_delimiters():
    assert token_kinds("(){},;.") == [
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
        TokenKind.DOT,
    ]


def test_unknown_character_is_error():
    assert token_kinds("a @ b") == [TokenKind.IDENTIFIER, TokenKind.ERROR, TokenKind.IDENTIFIER]


def test_unterminated_string_is_error():
    kinds = token_kinds('"abc')
    assert kinds[0] is TokenKind.ERROR
    assert kinds[1:] == [TokenKind.IDENTIFIER]


def test_overflowing_int_is_error():
    assert token_kinds("99999999999999999999") == [TokenKind.ERROR]


def test_start_offsets():
    assert [t.start for t in tokenize("let  x=1;")] == [0, 5, 6, 7, 8]


def test_empty_and_whitespace_only():
    assert token_kinds("") == []
    assert token_kinds(" \t\r\n") == []