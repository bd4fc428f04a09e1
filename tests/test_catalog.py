"""Tests for the reference frame catalog."""

import math

import jax.numpy as jnp

from skyframes.frames import (
    ECLIPTIC,
    EQUATORIAL_HA_DEC,
    EQUATORIAL_RA_DEC,
    FRAME_NAMES,
    GALACTIC,
    HORIZON,
    CatalogParams,
    build_catalog,
    build_catalog_from_params,
    rotation_ecliptic_to_ra_dec,
    rotation_ha_dec_to_horizon,
    rotation_ha_dec_to_ra_dec,
    rotation_ra_dec_to_galactic,
)

_LAT = 0.9
_LST = 1.2
_EPS = 0.409


class TestCatalogStructure:
    def test_frame_names(self):
        assert FRAME_NAMES == (
            "Horizon",
            "Equatorial_HA_Dec",
            "Equatorial_RA_Dec",
            "Ecliptic",
            "Galactic",
        )

    def test_five_frames(self):
        g = build_catalog(_LAT, _LST, _EPS)
        assert g.names == FRAME_NAMES

    def test_eight_edges(self):
        g = build_catalog(_LAT, _LST, _EPS)
        assert len(g.edges) == 8

    def test_every_edge_has_reverse(self):
        g = build_catalog(_LAT, _LST, _EPS)
        for edge in g.edges:
            assert g.edge(edge.target, edge.source) is not None

    def test_edge_labels(self):
        g = build_catalog(_LAT, _LST, _EPS)
        assert [e.label for e in g.edges] == [
            "Equatorial HA Dec to Horizon",
            "Horizon to Equatorial HA Dec",
            "Equatorial HA Dec to Equatorial RA Dec",
            "Equatorial RA Dec to Equatorial HA Dec",
            "Equatorial RA Dec to Ecliptic",
            "Ecliptic to Equatorial RA Dec",
            "Equatorial RA Dec to Galactic",
            "Galactic to Equatorial RA Dec",
        ]

    def test_no_direct_links_to_distant_frames(self):
        g = build_catalog(_LAT, _LST, _EPS)
        idx = g.index_of
        assert g.edge(idx(ECLIPTIC), idx(GALACTIC)) is None
        assert g.edge(idx(HORIZON), idx(ECLIPTIC)) is None
        assert g.edge(idx(HORIZON), idx(GALACTIC)) is None
        assert g.edge(idx(HORIZON), idx(EQUATORIAL_RA_DEC)) is None

    def test_all_matrices_attached(self):
        g = build_catalog(_LAT, _LST, _EPS)
        for edge in g.edges:
            assert edge.matrix is not None
            assert edge.matrix.shape == (3, 3)


class TestCatalogMatrices:
    def test_edges_use_parameters(self):
        g = build_catalog(_LAT, _LST, _EPS)
        idx = g.index_of
        assert jnp.allclose(
            g.edge(idx(EQUATORIAL_HA_DEC), idx(HORIZON)).matrix, rotation_ha_dec_to_horizon(_LAT)
        )
        assert jnp.allclose(
            g.edge(idx(EQUATORIAL_HA_DEC), idx(EQUATORIAL_RA_DEC)).matrix,
            rotation_ha_dec_to_ra_dec(_LST),
        )
        assert jnp.allclose(
            g.edge(idx(ECLIPTIC), idx(EQUATORIAL_RA_DEC)).matrix, rotation_ecliptic_to_ra_dec(_EPS)
        )
        assert jnp.array_equal(
            g.edge(idx(EQUATORIAL_RA_DEC), idx(GALACTIC)).matrix, rotation_ra_dec_to_galactic()
        )

    def test_degrees(self):
        g_deg = build_catalog(math.degrees(_LAT), math.degrees(_LST), math.degrees(_EPS), use_degrees=True)
        g_rad = build_catalog(_LAT, _LST, _EPS)
        for e_deg, e_rad in zip(g_deg.edges, g_rad.edges):
            assert jnp.allclose(e_deg.matrix, e_rad.matrix, atol=1e-14)

    def test_from_params(self):
        g_params = build_catalog_from_params(CatalogParams(_LAT, _LST, _EPS))
        g = build_catalog(_LAT, _LST, _EPS)
        for e_params, e in zip(g_params.edges, g.edges):
            assert jnp.array_equal(e_params.matrix, e.matrix)

    def test_catalogs_are_independent(self):
        g1 = build_catalog(_LAT, _LST, _EPS)
        g2 = build_catalog(_LAT, _LST + 0.5, _EPS)
        idx = g1.index_of
        m1 = g1.edge(idx(EQUATORIAL_HA_DEC), idx(EQUATORIAL_RA_DEC)).matrix
        m2 = g2.edge(idx(EQUATORIAL_HA_DEC), idx(EQUATORIAL_RA_DEC)).matrix
        assert not jnp.allclose(m1, m2)
