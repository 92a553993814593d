import inspect

import pytest
import warnings

from deprecate_parameters import (
    deprecated_alias,
    deprecated_class,
    deprecated_function,
    deprecated_parameter,
)


class Inpainting:
    @deprecated_alias(tensor_size="img_size")
    def __init__(self, img_size=None, mask=0.5):
        self.img_size = img_size
        self.mask = mask


@deprecated_alias(img_shape="img_size", input_shape="img_size_in")
def compare(img_size=None, img_size_in=None):
    return img_size, img_size_in


def test_deprecated_alias_image_size():
    img_size = (3, 16, 32)

    # Inpainting: tensor_size is changed to img_size
    with pytest.warns(DeprecationWarning, match="tensor_size.*deprecated"):
        p = Inpainting(tensor_size=img_size, mask=0.5)
        assert p.img_size == img_size

    # test_no_warning_with_correct_parameter
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        p = Inpainting(img_size=img_size, mask=0.5)
        assert p.img_size == img_size
        assert len(record) == 0

    # positional arguments are never aliased
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        p = Inpainting(img_size)
        assert p.img_size == img_size
        assert len(record) == 0

    # several aliases in one call
    with pytest.warns(DeprecationWarning, match="img_shape.*deprecated"):
        with pytest.warns(DeprecationWarning, match="input_shape.*deprecated"):
            assert compare(img_shape=img_size, input_shape=img_size) == (
                img_size,
                img_size,
            )


def test_deprecated_alias_message():
    with pytest.warns(DeprecationWarning) as record:
        compare(img_shape=(1, 2))
    assert str(record[0].message) == (
        "Argument 'img_shape' is deprecated and will be removed in a future version. "
        "Use 'img_size' instead."
    )
    assert record[0].filename == __file__


def test_deprecated_alias_conflict():
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        with pytest.raises(TypeError, match="Cannot specify both 'img_shape' and 'img_size'"):
            compare(img_shape=(1, 2), img_size=(1, 2))
        assert len(record) == 0


@pytest.mark.parametrize("aliases", [{"a": "a"}, {"a": "b", "b": "c"}])
def test_deprecated_alias_invalid(aliases):
    with pytest.raises(ValueError, match="Invalid alias"):
        deprecated_alias(**aliases)


def test_deprecated_alias_registry():
    assert list(compare.__deprecated_parameters__) == ["img_shape", "input_shape"]
    assert "Use 'img_size_in' instead." in compare.__deprecated_parameters__["input_shape"]


def test_alias_and_parameter_deprecation_combined():
    @deprecated_alias(rescale="rescale_mode")
    @deprecated_parameter("clip", "clip is ignored, clamp the output instead")
    def rescale_img(x, rescale_mode="min_max", clip=None):
        return x, rescale_mode

    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        assert rescale_img(1, rescale="clip", clip=True) == (1, "clip")

    assert [str(w.message) for w in record] == [
        "Argument 'rescale' is deprecated and will be removed in a future version. "
        "Use 'rescale_mode' instead.",
        "clip is ignored, clamp the output instead",
    ]


def test_deprecated_functions():
    @deprecated_function
    def rescale_img(x, rescale_mode="min_max"):
        return x

    with pytest.warns(DeprecationWarning, match="Function 'rescale_img' is deprecated"):
        assert rescale_img(3, rescale_mode="min_max") == 3

    @deprecated_function(reason="Use normalize_signal instead.")
    def norm(x):
        return x

    with pytest.warns(DeprecationWarning, match="Use normalize_signal instead") as record:
        assert norm(2) == 2
    assert record[0].filename == __file__
    assert norm.__name__ == "norm"


def test_deprecated_class():
    @deprecated_class
    class ProgressMeter:
        def __init__(self, num_epochs, prefix=""):
            self.num_epochs = num_epochs
            self.prefix = prefix

    with pytest.warns(DeprecationWarning, match="Class 'ProgressMeter' is deprecated") as record:
        meter = ProgressMeter(10, prefix="epoch")
    assert isinstance(meter, ProgressMeter)
    assert meter.num_epochs == 10
    assert record[0].filename == __file__


def test_parameter_deprecation_over_alias():
    @deprecated_parameter("clip", "clip is ignored, clamp the output instead")
    @deprecated_alias(rescale="rescale_mode")
    def rescale_img(x, rescale_mode="min_max", clip=None):
        return x, rescale_mode

    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        assert rescale_img(1, rescale="clip", clip=True) == (1, "clip")

    assert [str(w.message) for w in record] == [
        "clip is ignored, clamp the output instead",
        "Argument 'rescale' is deprecated and will be removed in a future version. "
        "Use 'rescale_mode' instead.",
    ]
    assert list(rescale_img.__deprecated_parameters__) == ["rescale", "clip"]


def test_decorated_signatures():
    @deprecated_alias(img_shape="img_size")
    def resize(x, img_size=None, **kwargs):
        return x

    assert list(inspect.signature(resize, follow_wrapped=False).parameters) == [
        "x",
        "img_size",
        "img_shape",
        "kwargs",
    ]

    @deprecated_function
    def norm(x, p=2):
        return x

    assert list(inspect.signature(norm, follow_wrapped=False).parameters) == ["x", "p"]

    @deprecated_class
    class ProgressMeter:
        def __init__(self, num_epochs, prefix=""):
            self.num_epochs = num_epochs

    assert list(inspect.signature(ProgressMeter).parameters) == ["num_epochs", "prefix"]
