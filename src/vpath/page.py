"""SVG page output for paths."""

from __future__ import annotations

import copy
import gzip
import io
import logging
from typing import Optional, Union

import svgwrite
import svgwrite.base
import svgwrite.container
import svgwrite.elementfactory
import svgwrite.path
import svgwrite.shapes

from vpath.geom import Rect
from vpath.path import Path

logger = logging.getLogger(__name__)


class SvgPage:
    """A page (canvas) described by SVG to draw paths on.

    The coordinate system is the canvas one: origin top-left, y pointing down.
    Contains groups:
        - main   -- the drawn paths
        - debug  -- e.g. bounding boxes, only saved on request
    """

    drawing: svgwrite.Drawing
    main_group: svgwrite.container.Group
    debug_group: svgwrite.container.Group

    def __init__(self, width: float, height: float, viewbox: Optional[Rect] = None):
        """
        Initialize the SVG page.

        Args:
            width (float): The width of the page in user units.
            height (float): The height of the page in user units.
            viewbox (Optional[Rect], optional): Visible area. Defaults to (0, 0, width, height).
        """
        if viewbox is None:
            viewbox = Rect(0.0, 0.0, width, height)

        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(width, height),
            viewBox=f"{viewbox.left} {viewbox.top} {viewbox.width} {viewbox.height}",
            profile="full",
        )
        self.main_group = self.drawing.g(id="main")
        self.debug_group = self.drawing.g(id="debug")

    def add(
        self,
        element: Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder],
        add_to_debug_group: bool = False,
    ) -> Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder]:
        """Add a SVG element as subelement either to main or debug group.

        Args:
            element (svgwrite.base.BaseElement): append this SVG element
            add_to_debug_group (bool, optional): True if element should be added to debug group.
                Defaults to False.

        Returns:
            svgwrite.base.BaseElement: the added element
        """
        if add_to_debug_group:
            return self.debug_group.add(element)
        return self.main_group.add(element)

    def add_path(self, path: Path, add_to_debug_group: bool = False, **extra) -> svgwrite.path.Path:
        """
        Replay _path_ into a SVG <path> element and add it to the page.

        The path's fill rule becomes the ``fill-rule`` attribute.

        Args:
            path (Path): The path to draw
            add_to_debug_group (bool, optional): Add to debug group. Defaults to False.
            **extra: Further SVG attributes, e.g. fill="black", stroke="none"

        Returns:
            svgwrite.path.Path: the added element
        """
        element = self.drawing.path(d=path.svg_path_string(), fill_rule=path.fill_rule.value, **extra)
        return self.add(element, add_to_debug_group)

    def add_bounds(self, path: Path, stroke: str = "red", stroke_width: float = 0.5) -> svgwrite.shapes.Rect:
        """Add the bounding rectangle of _path_ as outline to the debug group."""
        bounds = path.get_bounds()
        element = self.drawing.rect(
            insert=(bounds.left, bounds.top),
            size=(bounds.width, bounds.height),
            fill="none",
            stroke=stroke,
            stroke_width=stroke_width,
        )
        return self.add(element, add_to_debug_group=True)

    def to_string(self, include_debug_group: bool = False, pretty: bool = False, indent: int = 2) -> str:
        """Return the page as SVG document string."""
        drawing = self.assemble_tree(
            copy.deepcopy(self.drawing),
            copy.deepcopy(self.main_group),
            copy.deepcopy(self.debug_group),
            include_debug_group,
        )
        svg_buffer = io.StringIO()
        drawing.write(svg_buffer, pretty=pretty, indent=indent)
        return svg_buffer.getvalue()

    def save_as(
        self,
        filename: str,
        include_debug_group: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_group (bool, optional): True if file should contain debug_group. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        output_data = self.to_string(include_debug_group, pretty, indent).encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        logger.debug("saving %d bytes to %s", len(output_data), filename)
        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)

    @classmethod
    def assemble_tree(
        cls,
        drawing: svgwrite.Drawing,
        main_group: svgwrite.container.Group,
        debug_group: Optional[svgwrite.container.Group] = None,
        include_debug_group: bool = False,
    ) -> svgwrite.Drawing:
        """Assemble a tree out of the given SVG elements.

        Args:
            drawing (svgwrite.Drawing): The main SVG drawing element.
            main_group (svgwrite.container.Group): The main group of the drawing.
            debug_group (svgwrite.container.Group): The debug group of the drawing.
            include_debug_group (bool, optional): Include the debug group in the tree. Defaults to False.

        Returns:
            svgwrite.Drawing: The given drawing with assembled SVG drawing elements.
        """
        drawing.add(main_group)
        if include_debug_group and debug_group is not None:
            drawing.add(debug_group)
        return drawing
