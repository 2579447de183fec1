import pytest

from bfinterp.ir import (
    IRInstruction,
    IRType,
    backpatch,
    dump_ir,
    generate_ir,
    parse_chars,
)


def test_parse_chars_filters_comments():
    assert parse_chars("a+b-c <>\n.,[]!") == "+-<>.,[]"


def test_parse_chars_empty():
    assert parse_chars("hello world") == ""


def test_runs_are_collapsed():
    assert generate_ir("+++") == [IRInstruction(IRType.ADD, 3)]


def test_different_kinds_are_separate():
    result = generate_ir("++-->>")
    assert [i.type for i in result] == [IRType.ADD, IRType.SUB, IRType.INC_DP]
    assert all(i.operation == 2 for i in result)


def test_brackets_never_collapse_and_match():
    result = generate_ir("[[]]")
    assert [i.type for i in result] == [IRType.JIZ, IRType.JIZ, IRType.JNZ, IRType.JNZ]
    for index, instruction in enumerate(result):
        partner = result[instruction.operation]
        assert partner.operation == index
        assert partner.type is not instruction.type


def test_total_count_preserved():
    program = "++[>+++<-]>.."
    result = generate_ir(program)
    non_jump = sum(
        i.operation for i in result if i.type not in (IRType.JIZ, IRType.JNZ)
    )
    assert non_jump == sum(1 for ch in program if ch not in "[]")


def test_empty_program():
    assert generate_ir("") == []


def test_invalid_token_raises():
    with pytest.raises(ValueError):
        generate_ir("+x")


def test_unmatched_close_raises():
    with pytest.raises(ValueError):
        generate_ir("+]")


def test_unmatched_open_raises():
    with pytest.raises(ValueError):
        backpatch([IRInstruction(IRType.JIZ)])


def test_backpatch_in_place():
    instructions = [IRInstruction(IRType.JIZ), IRInstruction(IRType.ADD), IRInstruction(IRType.JNZ)]
    returned = backpatch(instructions)
    assert returned is instructions
    assert instructions[0].operation == 2
    assert instructions[2].operation == 0


def test_dump_ir_lists_instructions(capsys):
    dump_ir(generate_ir("++"))
    out = capsys.readouterr().out
    assert "[D] IR DUMP: size: 1\n" in out
    assert "[D] 0: Type: +, 43 | Operation: 2\n" in out