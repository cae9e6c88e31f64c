import pytest

from deadline_arcade.rsa import (
    ACCESS_DENIED,
    DECRYPT_BUTTON,
    FIELD_RECTS,
    INVALID_INPUT,
    SECRET_MESSAGE,
    DecryptorForm,
    Focus,
    check_access,
    decrypt_rsa,
    mod_exp,
)


@pytest.mark.parametrize("mod", [2, 7, 97, 2537])
def test_mod_exp_agrees_with_pow(mod):
    for base in range(0, 40):
        for exp in range(0, 25):
            assert mod_exp(base, exp, mod) == pow(base, exp, mod)


def test_mod_exp_zero_exponent_is_not_reduced():
    assert mod_exp(7, 0, 1) == 1


def test_mod_exp_zero_modulus_raises():
    with pytest.raises(ZeroDivisionError):
        mod_exp(3, 2, 0)


def test_decrypt_round_trip():
    n, e = 2537, 13
    d = pow(e, -1, 42 * 58)
    message = "HELLO"
    cipher = " ".join(str(pow(ord(c), e, n)) for c in message)
    assert decrypt_rsa(cipher, d, n) == message


def test_decrypt_empty():
    assert decrypt_rsa("   ", 5, 7) == ""


def test_decrypt_rejects_non_number():
    with pytest.raises(ValueError):
        decrypt_rsa("12 abc", 5, 7)


def test_check_access_outcomes():
    assert check_access("2537", "13", "2081 2182 2024") == SECRET_MESSAGE
    assert SECRET_MESSAGE == "Curzon is haunted"
    assert check_access("2537", "17", "2081 2182 2024") == ACCESS_DENIED
    assert check_access("2537", "13", "2081 2182") == ACCESS_DENIED


@pytest.mark.parametrize(
    "n_text, e_text", [("abc", "13"), ("2537", ""), ("", ""), ("99999999999999999999", "13")]
)
def test_check_access_invalid(n_text, e_text):
    assert check_access(n_text, e_text, "2081 2182 2024") == INVALID_INPUT


def test_check_access_ignores_trailing_text():
    assert check_access("2537xyz", " 13", "2081 2182 2024") == SECRET_MESSAGE


def _centre(rect):
    return rect.x + rect.w // 2, rect.y + rect.h // 2


def test_form_focus_and_typing():
    form = DecryptorForm()
    assert form.focus is Focus.N
    form.click(*_centre(FIELD_RECTS[Focus.E]))
    assert form.focus is Focus.E
    form.type("13")
    form.type("4")
    form.backspace()
    assert form.inputs == {Focus.N: "", Focus.E: "13", Focus.ENCRYPTED: ""}


def test_form_border_click_changes_nothing():
    form = DecryptorForm()
    rect = FIELD_RECTS[Focus.ENCRYPTED]
    form.click(rect.x, rect.y)
    assert form.focus is Focus.N


def test_form_backspace_on_empty_field():
    form = DecryptorForm()
    form.backspace()
    assert form.inputs[Focus.N] == ""


def test_form_decrypt_success_and_failure():
    form = DecryptorForm()
    assert not form.result_is_error()
    form.type("2537")
    form.click(*_centre(FIELD_RECTS[Focus.E]))
    form.type("13")
    form.click(*_centre(FIELD_RECTS[Focus.ENCRYPTED]))
    form.type("2081 2182 2024")
    form.click(*_centre(DECRYPT_BUTTON))
    assert form.result == SECRET_MESSAGE
    assert not form.result_is_error()

    form.backspace()
    form.click(*_centre(DECRYPT_BUTTON))
    assert form.result == ACCESS_DENIED
    assert form.result_is_error()


def test_form_invalid_numbers():
    form = DecryptorForm()
    form.click(*_centre(DECRYPT_BUTTON))
    assert form.result == INVALID_INPUT
    assert form.result_is_error()