"""Engine configuration — every tolerance, weight and threshold in one place.

The confidence weights are calibrated heuristics, defaults rather than
guarantees. Override any field with ``EngineConfig(field=value)`` or
``dataclasses.replace(config, field=value)``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Thresholds threaded through every analyzer, detector and relationship pass."""

    # ── Geometry grouping ──
    grid_tolerance: float = 15.0  # px; row/column membership
    alignment_tolerance: float = 10.0  # px; shared edge / center
    min_grid_elements: int = 3
    grid_population_variance_limit: float = 1.0  # row/column size variance must stay below
    regularity_variance_scale: float = 100.0  # 1 − var/scale for regularity and alignment quality

    # ── Spacing ──
    spacing_bucket: int = 5  # px; common gap values are rounded to this
    common_spacing_count: int = 3

    # ── Layout type scores ──
    grid_score_threshold: float = 0.7
    flex_score_threshold: float = 0.6
    flow_score_threshold: float = 0.5
    flex_variance_limit: float = 0.1
    flex_line_weight: float = 0.3
    flow_step_weight: float = 0.1

    # ── Layout hints ──
    header_band_height: float = 100.0
    header_span_fraction: float = 0.8
    sidebar_left_edge: float = 200.0
    sidebar_right_edge: float = 600.0
    mobile_max_width: float = 768.0
    desktop_min_width: float = 1024.0
    header_hint_min_elements: int = 2
    header_hint_confidence: float = 0.8
    sidebar_hint_min_elements: int = 3
    sidebar_hint_confidence: float = 0.7
    card_hint_min_elements: int = 3
    card_hint_confidence: float = 0.9

    # ── Layout quality weights ──
    quality_grid_weight: float = 0.3
    quality_alignment_weight: float = 0.3
    quality_spacing_weight: float = 0.2
    quality_efficiency_weight: float = 0.2
    efficient_coverage: float = 0.6

    # ── Pattern matching ──
    min_pattern_confidence: float = 0.7
    nav_min_elements: int = 3
    nav_top_fraction: float = 0.2
    nav_top_confidence: float = 0.9
    nav_confidence: float = 0.7
    breadcrumb_top_y: float = 200.0
    breadcrumb_top_confidence: float = 0.8
    breadcrumb_confidence: float = 0.6
    hero_region_fraction: float = 0.4
    hero_min_height: float = 100.0
    hero_large_text_weight: float = 0.4
    hero_cta_weight: float = 0.3
    hero_span_weight: float = 0.3
    hero_span_fraction: float = 0.6
    three_column_spacing_tolerance: float = 50.0
    three_column_even_confidence: float = 0.9
    three_column_confidence: float = 0.7
    card_min_count: int = 4
    card_uniformity_threshold: float = 0.7
    card_grid_confidence: float = 0.9
    card_confidence: float = 0.7
    form_min_inputs: int = 2
    form_input_weight: float = 0.4
    form_label_weight: float = 0.3
    form_label_coverage: float = 0.5
    form_submit_weight: float = 0.3
    gallery_min_images: int = 4
    gallery_ratio_coverage: float = 0.7
    gallery_uniformity_threshold: float = 0.8
    gallery_confidence: float = 0.8
    article_long_text_length: int = 100
    article_min_long_texts: int = 2
    article_header_weight: float = 0.3
    article_body_weight: float = 0.4
    article_lead_weight: float = 0.3
    sidebar_edge_fraction: float = 0.25
    sidebar_min_elements: int = 3
    sidebar_max_gap: float = 100.0
    sidebar_max_overlap: float = 10.0
    sidebar_confidence: float = 0.8
    masonry_min_elements: int = 6
    masonry_width_uniformity: float = 0.7
    masonry_height_variability: float = 0.3
    masonry_confidence: float = 0.8

    # ── Complexity ──
    complexity_component_scale: float = 20.0
    complexity_component_weight: float = 0.3
    complexity_color_scale: float = 15.0
    complexity_color_weight: float = 0.2
    complexity_grid_weight: float = 0.2
    complexity_flexbox_weight: float = 0.15
    complexity_custom_weight: float = 0.3
    complexity_edge_weight: float = 0.3

    # ── Design-system compliance ──
    compliance_min_elements: int = 3  # below this a sub-score stays neutral
    compliance_neutral_score: float = 0.5
    compliance_missing_score: float = 0.3  # enough elements but nothing measurable
    compliance_palette_top: int = 5
    compliance_palette_boost: float = 1.2
    compliance_spacing_max_distance: float = 200.0
    compliance_spacing_bucket: int = 10
    compliance_spacing_top: int = 3
    compliance_font_bucket: int = 2
    compliance_font_free_sizes: int = 3  # distinct sizes allowed before the score drops
    compliance_button_min: int = 2
    compliance_button_weight: float = 0.3
    compliance_input_min: int = 2
    compliance_input_weight: float = 0.3
    compliance_card_min: int = 3
    compliance_card_weight: float = 0.4
    compliance_color_weight: float = 0.25
    compliance_spacing_weight: float = 0.25
    compliance_typography_weight: float = 0.25
    compliance_component_weight: float = 0.25

    # ── Advanced layouts ──
    css_grid_min_confidence: float = 0.6
    flexbox_min_confidence: float = 0.6
    subgrid_min_confidence: float = 0.5
    grid_gap_consistency: float = 0.8  # spacing consistency read as a uniform gap
    flexbox_min_items: int = 3
    flexbox_width_variance: float = 0.2  # normalized; above reads as flex-grow
    spanning_width_factor: float = 1.5
    subgrid_container_min_width: float = 200.0
    subgrid_container_min_height: float = 150.0
    subgrid_min_children: int = 4
    subgrid_regularity_threshold: float = 0.7
    css_grid_base_weight: float = 0.4
    css_grid_gap_weight: float = 0.2  # per consistent axis
    css_grid_spanning_weight: float = 0.2
    flexbox_axis_weight: float = 0.3  # per direction with enough items
    flexbox_grow_weight: float = 0.2
    flexbox_justify_weight: float = 0.1
    subgrid_nested_weight: float = 0.4  # per nested grid

    # ── Spatial relationships ──
    proximity_threshold: float = 50.0  # px edge-to-edge for "adjacent"
    containment_padding: float = 5.0
    containment_strength: float = 0.9
    overlap_strength: float = 0.8
    aligned_max_distance: float = 200.0
    aligned_base_strength: float = 0.7
    aligned_distance_scale: float = 500.0
    adjacent_base_strength: float = 0.6
    adjacent_distance_scale: float = 100.0
    spatial_min_strength: float = 0.3

    # ── Functional relationships ──
    functional_relationship_threshold: float = 0.6
    functional_type_weight: float = 0.4
    functional_near_distance: float = 100.0
    functional_near_bonus: float = 0.3
    functional_mid_distance: float = 200.0
    functional_mid_bonus: float = 0.2
    functional_text_weight: float = 0.3
    submit_max_distance: float = 300.0
    submit_confidence: float = 0.8
    action_confidence: float = 0.5
    submit_distance_scale: float = 1000.0
    label_max_distance: float = 100.0
    label_base_confidence: float = 0.9
    label_distance_scale: float = 200.0
    form_group_max_distance: float = 150.0
    form_group_base_confidence: float = 0.7
    form_group_distance_scale: float = 300.0
    nav_group_max_distance: float = 200.0
    nav_group_confidence: float = 0.8

    # ── Semantic relationships ──
    header_content_max_distance: float = 200.0
    header_content_base_confidence: float = 0.8
    header_content_distance_scale: float = 400.0
    caption_max_distance: float = 150.0
    caption_base_confidence: float = 0.7
    caption_distance_scale: float = 300.0
    caption_min_length: int = 10
    caption_max_length: int = 200

    # ── Layout relationships ──
    layout_alignment_confidence: float = 0.8
    grid_neighbor_confidence: float = 0.9

    # ── Groups, flows, summary ──
    proximity_group_distance: float = 150.0
    flow_distance: float = 400.0
    flow_confidence: float = 0.8
    strong_relationship_threshold: float = 0.8
    summary_top_count: int = 5
