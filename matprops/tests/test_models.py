import numpy as np
import pytest

from matprops.errors import UnknownModel
from matprops.models import (ConductivityModel, ElasticModel,
        HoneycombExpansionModel, UnidirectionalExpansionModel, resolve,
        available_models)


def test_resolve():
    assert resolve(ConductivityModel, 1) is ConductivityModel.RULE_OF_MIXTURES
    assert resolve(ConductivityModel, 2) is ConductivityModel.VANIN
    assert resolve(HoneycombExpansionModel, 1) is HoneycombExpansionModel.VANIN
    assert (resolve(UnidirectionalExpansionModel, np.uint8(1))
            is UnidirectionalExpansionModel.VANIN)
    assert resolve(ElasticModel, 2) is ElasticModel.VANIN


def test_unknown():
    for kind in [ConductivityModel, HoneycombExpansionModel,
                 UnidirectionalExpansionModel, ElasticModel]:
        for identifier in [0, -1, max(kind) + 1, 2.5, '1', None, True]:
            with pytest.raises(UnknownModel) as excinfo:
                resolve(kind, identifier)
            assert excinfo.value.kind is kind
            assert excinfo.value.identifier is identifier


def test_available_models():
    assert available_models(ConductivityModel) == [(1, 'RULE_OF_MIXTURES'),
                                                  (2, 'VANIN')]
    assert available_models(HoneycombExpansionModel) == [(1, 'VANIN')]
