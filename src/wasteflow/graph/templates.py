"""
HTML templates for the flow and bar-chart pages.

Both templates receive their data through a single JSON placeholder.
"""

SANKEY_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Hazardous Waste Flows</title>
    <style>
        body {
            margin: 0;
            background: __BACKGROUND__;
            color: #ffffff;
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
        }

        #canvas { padding: 16px; }

        .tooltip {
            position: absolute;
            display: none;
            pointer-events: none;
            background: rgba(17, 17, 17, 0.95);
            border: 2px solid #7570b3;
            border-radius: 6px;
            padding: 10px 14px;
            font-size: 14px;
            line-height: 1.4;
            max-width: 360px;
        }

        @keyframes fadeIn {
            from { opacity: 0; }
            to { opacity: 1; }
        }

        @keyframes flowAnimation {
            from { stroke-dashoffset: var(--path-length); opacity: 0.7; }
            to { stroke-dashoffset: 0; opacity: 0.7; }
        }
    </style>
</head>
<body>
    <div id="canvas"></div>
    <div class="tooltip" id="tooltip"></div>

    <script type="module">
        import * as d3 from "https://cdn.jsdelivr.net/npm/d3@7/+esm";
        import { sankey, sankeyLinkHorizontal } from "https://cdn.jsdelivr.net/npm/d3-sankey@0.12/+esm";

        const PAYLOAD = __WASTEFLOW_DATA__;
        const SETTINGS = PAYLOAD.settings;
        const MARGIN = { top: 100, right: 300, bottom: 100, left: 400 };
        const TIMELINE = { height: 50, yOffset: 200, radius: 12, gap: 100 };

        const tooltip = d3.select("#tooltip");

        function linkColor(link) {
            return SETTINGS.colors[link.category] || SETTINGS.colors.generated;
        }

        function nodeColor(node) {
            if (node.kind === "country") return SETTINGS.colors.countries;
            if (node.kind === "generated") return SETTINGS.colors.generated;
            if (node.name === "Incinerated") return SETTINGS.colors.incinerated;
            if (node.name === "Recycled") return SETTINGS.colors.recycled;
            return SETTINGS.colors.environmental;
        }

        function tooltipHtml(name, details) {
            const d = details[name];
            if (!d) return `<strong>${name}</strong>`;
            if (d.kind === "terminal") {
                const sources = d.sources.map(s => `${s.name}: ${s.label}`).join("<br>");
                return `<strong>${name}</strong><br>Total: ${d.label}<br>` +
                       `<br>Sources (ordered by amount):<br>${sources}`;
            }
            const b = d.breakdown;
            if (!b) return `<strong>${name}</strong><br>${d.label}`;
            return `<strong>${b.country}</strong><br>` +
                   `Generated: ${d3.format(",")(b.generated)} ${SETTINGS.unit}<br>` +
                   `Incinerated: ${d3.format(",")(b.incinerated)} ${SETTINGS.unit} (${b.incinerated_pct}% of generated)<br>` +
                   `Recycled: ${d3.format(",")(b.recycled)} ${SETTINGS.unit} (${b.recycled_pct}% of generated)`;
        }

        function showTooltip(event, html, color) {
            tooltip.style("display", "block")
                .style("border-color", color)
                .html(html)
                .style("left", (event.pageX + 10) + "px")
                .style("top", (event.pageY - 10) + "px");
        }

        function moveTooltip(event) {
            tooltip.style("left", (event.pageX + 10) + "px")
                .style("top", (event.pageY - 10) + "px");
        }

        function hideTooltip() {
            tooltip.style("display", "none");
        }

        function drawTimeline(svg, width, year) {
            const years = PAYLOAD.years;
            const g = svg.append("g").attr("transform", `translate(0, ${MARGIN.top})`);
            const x = d3.scaleLinear()
                .domain([d3.min(years), d3.max(years)])
                .range([MARGIN.left + 100, width - MARGIN.right - 100]);

            for (let i = 0; i < years.length - 1; i++) {
                g.append("line")
                    .attr("x1", x(years[i]) + TIMELINE.radius)
                    .attr("x2", x(years[i + 1]) - TIMELINE.radius)
                    .attr("y1", TIMELINE.height / 2)
                    .attr("y2", TIMELINE.height / 2)
                    .attr("stroke", SETTINGS.colors.text)
                    .attr("stroke-width", 2);
            }

            g.selectAll("circle")
                .data(years)
                .join("circle")
                .attr("cx", d => x(d))
                .attr("cy", TIMELINE.height / 2)
                .attr("r", TIMELINE.radius)
                .attr("fill", d => d === year ? SETTINGS.colors.text : "none")
                .attr("stroke", SETTINGS.colors.text)
                .attr("stroke-width", 2)
                .style("cursor", "pointer")
                .on("mouseover", function(event, d) {
                    if (d !== year) {
                        d3.select(this).transition().duration(150)
                            .attr("fill", "rgba(255, 255, 255, 0.5)")
                            .attr("r", TIMELINE.radius * 1.1);
                    }
                })
                .on("mouseout", function(event, d) {
                    if (d !== year) {
                        d3.select(this).transition().duration(150)
                            .attr("fill", "none")
                            .attr("r", TIMELINE.radius);
                    }
                })
                .on("click", (event, d) => {
                    if (d !== year) {
                        event.stopPropagation();
                        render(d);
                    }
                });

            g.selectAll("text")
                .data(years)
                .join("text")
                .attr("x", d => x(d))
                .attr("y", TIMELINE.height / 2 - TIMELINE.radius * 2)
                .attr("text-anchor", "middle")
                .attr("fill", SETTINGS.colors.text)
                .attr("font-size", "22px")
                .attr("font-weight", "bold")
                .text(d => d);
        }

        function render(year) {
            const entry = PAYLOAD.graphs[String(year)];
            if (!entry) return;

            // d3-sankey mutates its input
            const graph = JSON.parse(JSON.stringify(entry.graph));
            const details = entry.details;
            const width = SETTINGS.width;
            const height = entry.height;
            const totalHeight = height + TIMELINE.yOffset + TIMELINE.height;

            d3.select("#canvas").selectAll("svg").remove();
            hideTooltip();

            const svg = d3.select("#canvas")
                .append("svg")
                .attr("width", width)
                .attr("height", totalHeight)
                .attr("viewBox", [0, 0, width, totalHeight])
                .attr("style", "max-width: 100%; height: auto;");

            drawTimeline(svg, width, year);

            if (graph.links.length === 0) return;

            const layout = sankey()
                .nodeWidth(SETTINGS.node_width)
                .nodePadding(SETTINGS.node_padding)
                .nodeSort(null)
                .extent([
                    [MARGIN.left, MARGIN.top + TIMELINE.height + TIMELINE.gap],
                    [width - MARGIN.right, height - MARGIN.bottom]
                ])(graph);

            svg.append("g")
                .selectAll("path")
                .data(layout.links)
                .join("path")
                .attr("d", sankeyLinkHorizontal())
                .attr("fill", "none")
                .attr("stroke", linkColor)
                .attr("stroke-width", d => Math.max(1, d.width))
                .attr("opacity", 0)
                .each(function() {
                    const length = this.getTotalLength();
                    d3.select(this)
                        .style("stroke-dasharray", `${length} ${length}`)
                        .style("--path-length", length);
                })
                .style("animation", (d, i) => `flowAnimation 3s ease-in-out ${i * 100}ms forwards`)
                .on("mouseover", (event, d) => showTooltip(event, tooltipHtml(d.source.name, details), linkColor(d)))
                .on("mousemove", moveTooltip)
                .on("mouseout", hideTooltip);

            svg.append("g")
                .selectAll("rect")
                .data(layout.nodes)
                .join("rect")
                .attr("x", d => d.x0)
                .attr("y", d => d.y0)
                .attr("width", d => d.x1 - d.x0)
                .attr("height", d => Math.max(1, d.y1 - d.y0))
                .attr("fill", nodeColor)
                .attr("stroke", SETTINGS.colors.stroke)
                .attr("opacity", 0)
                .style("animation", (d, i) => `fadeIn 0.8s ease-out ${i * 100}ms forwards`)
                .on("mouseover", (event, d) => showTooltip(event, tooltipHtml(d.name, details), nodeColor(d)))
                .on("mousemove", moveTooltip)
                .on("mouseout", hideTooltip);

            svg.append("g")
                .selectAll("text")
                .data(layout.nodes.filter(d => d.kind !== "generated"))
                .join("text")
                .attr("x", d => d.kind === "terminal" ? d.x1 + 10 : d.x0 - 10)
                .attr("y", d => (d.y1 + d.y0) / 2)
                .attr("dy", "0.35em")
                .attr("text-anchor", d => d.kind === "terminal" ? "start" : "end")
                .attr("fill", SETTINGS.colors.text)
                .attr("font-size", "22px")
                .attr("font-weight", "bold")
                .attr("opacity", 0)
                .style("animation", (d, i) => `fadeIn 0.8s ease-out ${i * 100}ms forwards`)
                .text(d => `${d.name} (${details[d.name] ? details[d.name].label : d.value})`);
        }

        render(PAYLOAD.selected_year);
    </script>
</body>
</html>
"""


BAR_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Hazardous Waste by Country</title>
    <script src="https://d3js.org/d3.v7.min.js"></script>
    <style>
        body { margin: 0; background: __BACKGROUND__; }
    </style>
</head>
<body>
    <div id="canvas"></div>
    <script>
        const PAYLOAD = __WASTEFLOW_DATA__;
        const SETTINGS = PAYLOAD.settings;
        const width = 1400, height = 900;
        const margin = { left: 50, right: 50, top: 100, bottom: 100 };
        const barHeight = 60;
        const columnWidth = 450;

        const canvas = d3.select("#canvas")
            .append("svg")
            .attr("width", width)
            .attr("height", height)
            .style("background-color", SETTINGS.colors.background);

        const allEntries = PAYLOAD.histories.flatMap(h => h.entries);
        const widthScale = d3.scaleLinear()
            .domain([0, d3.max(allEntries, d => d.generated) || 1])
            .range([50, 400]);

        const pileX = width / 2;
        const pileY = height - margin.bottom;

        PAYLOAD.histories.forEach((history, countryIndex) => {
            const baseX = 300 + countryIndex * columnWidth;
            const centre = baseX + 100;

            canvas.append("text")
                .attr("x", centre)
                .attr("y", margin.top - 40)
                .attr("fill", SETTINGS.colors.text)
                .attr("font-size", "24px")
                .attr("text-anchor", "middle")
                .text(history.country);

            history.entries.forEach((d, i) => {
                const y = margin.top + i * barHeight;
                const totalW = widthScale(d.generated);
                const incW = d.incinerated_share * totalW;
                const recW = d.recycled_share * totalW;
                const residualW = totalW - incW - recW;
                const barX = centre - totalW / 2;

                const segments = [
                    [barX, incW, SETTINGS.colors.incinerated],
                    [barX + incW, residualW, SETTINGS.colors.environmental],
                    [barX + totalW - recW, recW, SETTINGS.colors.recycled],
                ];
                segments.filter(s => s[1] > 0).forEach(([x, w, color]) => {
                    canvas.append("rect")
                        .attr("x", x).attr("y", y)
                        .attr("width", w).attr("height", barHeight)
                        .attr("fill", color)
                        .attr("stroke", SETTINGS.colors.stroke);
                });

                canvas.append("text")
                    .attr("x", centre)
                    .attr("y", y + barHeight / 2 + 5)
                    .attr("fill", SETTINGS.colors.text)
                    .attr("font-size", "12px")
                    .attr("text-anchor", "middle")
                    .text(`${d.generated.toLocaleString()} ${SETTINGS.unit}`);

                if (countryIndex === 0) {
                    canvas.append("text")
                        .attr("x", margin.left)
                        .attr("y", y + barHeight / 2 + 5)
                        .attr("fill", SETTINGS.colors.text)
                        .attr("font-size", "14px")
                        .text(d.year);
                }

                if (i === history.entries.length - 1) {
                    const fromX = barX + incW + residualW - 50;
                    const fromY = y + barHeight;
                    const path = d3.path();
                    path.moveTo(fromX, fromY);
                    path.bezierCurveTo(fromX, fromY + 80, pileX, pileY - 100, pileX, pileY);
                    canvas.append("path")
                        .attr("d", path.toString())
                        .attr("stroke", SETTINGS.colors.environmental)
                        .attr("fill", "none")
                        .attr("stroke-width", 2)
                        .attr("opacity", 0.4);
                }
            });
        });

        const pileW = PAYLOAD.pile_width;
        canvas.append("path")
            .attr("d", d3.line()([
                [pileX - pileW / 2, pileY],
                [pileX, pileY - 60],
                [pileX + pileW / 2, pileY]
            ]))
            .attr("fill", SETTINGS.colors.environmental)
            .attr("stroke", "#555");

        canvas.append("text")
            .attr("x", pileX)
            .attr("y", pileY + 25)
            .attr("fill", SETTINGS.colors.text)
            .attr("font-size", "14px")
            .attr("text-anchor", "middle")
            .text(`Total unprocessed waste (${PAYLOAD.total_unprocessed_label})`);
    </script>
</body>
</html>
"""
