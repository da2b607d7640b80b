"""T-shirt designer endpoints."""

from fastapi import APIRouter

from rockmundo.core.models.io.merch import DesignElementModel, ImagePlacementRequest, TShirtDesign
from rockmundo.game.merch_designer import DesignElement, fit_image, new_element_id, normalize_side, print_area

router = APIRouter(tags=["merch"])


def to_element(model: DesignElementModel) -> DesignElement:
    return DesignElement(**model.model_dump())


def to_model(element: DesignElement) -> DesignElementModel:
    return DesignElementModel.model_validate(element, from_attributes=True)


@router.post(
    "/designs/normalize",
    response_model=TShirtDesign,
    response_model_by_alias=True,
    summary="Normalize Design",
    description=(
        "Clamp every element of a saved design into its side's print area and bring scale, "
        "rotation and font size back within the editor's limits. At most 5 images per side."
    ),
    responses={400: {"description": "Too many images on a side"}},
)
async def normalize_design(design: TShirtDesign) -> TShirtDesign:
    return design.model_copy(
        update={
            "front": [to_model(el) for el in normalize_side([to_element(m) for m in design.front], "front")],
            "back": [to_model(el) for el in normalize_side([to_element(m) for m in design.back], "back")],
        }
    )


@router.post(
    "/designs/images",
    response_model=DesignElementModel,
    response_model_by_alias=True,
    summary="Place Image",
    description="Scale an uploaded image to fit and centre it in the print area of a side.",
)
async def place_image(placement: ImagePlacementRequest) -> DesignElementModel:
    element = fit_image(new_element_id(), placement.src, placement.width, placement.height, print_area(placement.side))
    return to_model(element)
