# SPDX-License-Identifier: Apache-2.0
"""globe.gl based renderer for the layered atlas globe.

The generated bundle loads globe.gl from the unpkg CDN and the country
polygons from ``countries_url`` at page load; markers, style and camera come
from the embedded scene.
"""

from __future__ import annotations

import json
import logging
from html import escape
from pathlib import Path
from textwrap import dedent

from .base import InteractiveBundle, InteractiveRenderer

LOGGER = logging.getLogger(__name__)

GLOBE_GL_URL = "https://unpkg.com/globe.gl@2.32.0/dist/globe.gl.min.js"


def _script_json(config: dict[str, object]) -> str:
    # Keep "</script>" inside string values from closing the tag.
    return json.dumps(config, indent=2).replace("</", "<\\/")


class GlobeGLRenderer(InteractiveRenderer):
    """globe.gl renderer emitting the layered atlas as a standalone bundle."""

    def config(self) -> dict[str, object]:
        config = super().config()
        config.setdefault("title", "Hemp Atlas")
        config.setdefault("width", None)
        config.setdefault("height", None)
        config.setdefault("scene", {})
        config.setdefault("layers", [])
        # Polygons are styled in the page from the scene defaults.
        scene = dict(config["scene"])
        scene.pop("polygons", None)
        config["scene"] = scene
        return config

    def build(self, *, output_dir: Path) -> InteractiveBundle:
        output_dir = Path(output_dir)
        assets_dir = output_dir / "assets"
        assets_dir.mkdir(parents=True, exist_ok=True)

        index_html = output_dir / "index.html"
        script_path = assets_dir / "globe.js"
        config_path = assets_dir / "config.json"

        config = self.config()
        self.write_config(config_path, config)
        index_html.write_text(self._render_index_html(config), encoding="utf-8")
        script_path.write_text(self._render_script(), encoding="utf-8")
        LOGGER.debug(
            "Wrote %s with %d points",
            index_html,
            len(config["scene"].get("points", [])),
        )

        return InteractiveBundle(
            output_dir=output_dir,
            index_html=index_html,
            assets=(script_path, config_path),
        )

    def _render_index_html(self, config: dict[str, object]) -> str:
        title = escape(str(config.get("title") or "Hemp Atlas"))
        return (
            dedent(
                f"""
            <!DOCTYPE html>
            <html lang=\"en\">
              <head>
                <meta charset=\"utf-8\" />
                <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
                <title>{title}</title>
                <style>
                  html, body {{ margin: 0; padding: 0; width: 100%; height: 100%; background: #000; color: #f5f7fa; font-family: system-ui, sans-serif; }}
                  #atlas-globe {{ width: 100%; height: 100%; }}
                  #atlas-layers {{ position: absolute; top: 16px; left: 16px; background: rgba(0, 0, 0, 0.6); padding: 12px 16px; border-radius: 8px; min-width: 220px; }}
                  #atlas-layers .layer {{ display: flex; justify-content: space-between; gap: 12px; margin: 4px 0; }}
                  #atlas-layers .layer.locked, #atlas-layers .layer.disabled {{ opacity: 0.5; }}
                  #atlas-layers .hint {{ font-size: 0.75rem; color: rgba(245, 247, 250, 0.7); }}
                  #atlas-controls {{ position: absolute; bottom: 16px; right: 16px; display: flex; flex-direction: column; gap: 6px; }}
                  #atlas-controls button {{ width: 36px; height: 36px; border-radius: 8px; border: none; background: rgba(0, 0, 0, 0.6); color: #fff; cursor: pointer; }}
                  #atlas-card {{ position: absolute; bottom: 16px; left: 16px; max-width: 320px; background: rgba(0, 0, 0, 0.75); padding: 14px 18px; border-radius: 10px; display: none; }}
                  #atlas-card h3 {{ margin: 0 0 6px; }}
                  #atlas-card .close {{ float: right; cursor: pointer; }}
                </style>
              </head>
              <body>
                <div id=\"atlas-globe\"></div>
                <div id=\"atlas-layers\"></div>
                <div id=\"atlas-controls\">
                  <button type=\"button\" data-action=\"zoom-in\">+</button>
                  <button type=\"button\" data-action=\"zoom-out\">&minus;</button>
                  <button type=\"button\" data-action=\"reset\">&#8634;</button>
                </div>
                <div id=\"atlas-card\"></div>
                <script>
                  window.HEMPATLAS_GLOBE_CONFIG = {_script_json(config)};
                </script>
                <script src=\"{GLOBE_GL_URL}\"></script>
                <script src=\"assets/globe.js\"></script>
              </body>
            </html>
            """
            ).strip()
            + "\n"
        )

    def _render_script(self) -> str:
        return (
            dedent(
                """
            (function () {
              const config = window.HEMPATLAS_GLOBE_CONFIG || {};
              const scene = config.scene || {};
              const style = scene.style || {};
              const defaults = scene.polygon_defaults || {};
              const container = document.getElementById("atlas-globe");
              const panel = document.getElementById("atlas-layers");
              const card = document.getElementById("atlas-card");

              if (typeof window.Globe !== "function") {
                panel.innerHTML = "<strong>globe.gl failed to load.</strong>";
                return;
              }

              function escapeHtml(value) {
                return String(value == null ? "" : value)
                  .replace(/&/g, "&amp;")
                  .replace(/</g, "&lt;")
                  .replace(/>/g, "&gt;")
                  .replace(/"/g, "&quot;");
              }

              function featureName(feature) {
                const props = (feature && feature.properties) || {};
                return props.ADMIN || props.NAME || props.name || null;
              }

              let hovered = null;
              const isHovered = (feature) => {
                const name = featureName(feature);
                return Boolean(hovered && name && name === hovered);
              };

              function renderLayers() {
                const rows = (config.layers || []).map((entry) => {
                  const layer = entry.layer || {};
                  const hint = entry.message
                    ? `<div class="hint">${escapeHtml(entry.message)}</div>`
                    : "";
                  return `<div class="layer ${escapeHtml(entry.status)}">
                    <span>${escapeHtml(layer.icon)} ${escapeHtml(layer.name)}</span>
                    <span>${escapeHtml(entry.count_label)}</span>
                  </div>${hint}`;
                });
                panel.innerHTML = rows.join("") || "<em>No layers</em>";
              }

              function showCard(point) {
                const info = point && point.card;
                if (!info) {
                  card.style.display = "none";
                  return;
                }
                const extra = info.type === "organization"
                  ? `<p>&#128205; ${escapeHtml(info.location)}</p>`
                  : (info.price ? `<p>${escapeHtml(info.price)}</p>` : "");
                card.innerHTML = `<span class="close" data-action="close">&times;</span>
                  <h3 style="color: ${escapeHtml(info.color)}">${escapeHtml(info.title)}</h3>
                  <p>${escapeHtml(info.description)}</p>${extra}`;
                card.style.display = "block";
              }

              const camera = Object.assign({ lat: 20, lng: 0, altitude: 2.5 }, scene.camera || {});
              const atmosphere = scene.atmosphere || {};
              const globe = Globe()(container)
                .backgroundColor("rgba(0,0,0,0)")
                .showGlobe(true)
                .showAtmosphere(atmosphere.show !== false)
                .atmosphereColor(atmosphere.color || style.atmosphereColor)
                .atmosphereAltitude(typeof atmosphere.altitude === "number" ? atmosphere.altitude : 0.25)
                .polygonCapColor((d) => (isHovered(d) ? defaults.hover_cap_color : style.landColor))
                .polygonSideColor(() => style.landColor)
                .polygonStrokeColor((d) => (isHovered(d) ? style.atmosphereColor : defaults.stroke_color))
                .polygonAltitude((d) => (isHovered(d) ? defaults.hover_altitude : defaults.base_altitude))
                .polygonCapCurvatureResolution(4)
                .polygonsTransitionDuration(300)
                .polygonLabel((d) => `<b>${escapeHtml(featureName(d) || "Unknown")}</b>`)
                .onPolygonHover((feature) => {
                  hovered = featureName(feature);
                  globe.polygonsData(globe.polygonsData());
                })
                .pointsData(scene.points || [])
                .pointLat("lat")
                .pointLng("lng")
                .pointAltitude("altitude")
                .pointRadius("radius")
                .pointColor("color")
                .pointLabel((d) => escapeHtml(d.label))
                .onPointClick(showCard);

              const material = globe.globeMaterial();
              if (material && material.color && scene.globe_material) {
                material.color.set(scene.globe_material.color);
              }

              if (config.width) globe.width(config.width);
              if (config.height) globe.height(config.height);
              globe.pointOfView(camera, 0);

              document.getElementById("atlas-controls").addEventListener("click", (event) => {
                const action = event.target && event.target.dataset.action;
                const pov = globe.pointOfView();
                if (action === "zoom-in") {
                  globe.pointOfView({ altitude: Math.max(pov.altitude - 0.5, 1.5) }, 1000);
                } else if (action === "zoom-out") {
                  globe.pointOfView({ altitude: Math.min(pov.altitude + 0.5, 4) }, 1000);
                } else if (action === "reset") {
                  globe.pointOfView({ lat: 20, lng: 0, altitude: 2.5 }, 1000);
                }
              });

              card.addEventListener("click", (event) => {
                if (event.target && event.target.dataset.action === "close") {
                  card.style.display = "none";
                }
              });

              renderLayers();
              if (scene.selection && scene.selection.card) {
                showCard({ card: scene.selection.card });
              }

              if (config.countries_url) {
                fetch(config.countries_url)
                  .then((res) => res.json())
                  .then((data) => {
                    if (data && Array.isArray(data.features)) {
                      globe.polygonsData(data.features);
                    }
                  })
                  .catch((error) => {
                    console.error("Failed to load country polygons", error);
                  });
              }

              window.addEventListener("resize", () => {
                globe.width(config.width || window.innerWidth);
                globe.height(config.height || window.innerHeight);
              });
            })();
            """
            ).strip()
            + "\n"
        )
